from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class JobDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    jurisdiction: str
    code: str
    title: str
    description: str = ""


class SalaryRecord(BaseModel):
    # Salary rows keep the spreadsheet column names of the published tables.
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    jurisdiction: str = Field(alias="Jurisdiction")
    job_code: str = Field(alias="Job Code")
    grade1: str = Field(default="", alias="Salary grade 1")
    grade2: str = Field(default="", alias="Salary grade 2")


class SalaryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    grade1: str
    grade2: str


class QueryContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    jurisdiction: str = ""
    description: str = ""
    salary: Optional[SalaryInfo] = None
