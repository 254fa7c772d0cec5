"""
Pytest configuration and shared fixtures.
"""

import asyncio
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

from jobinfo.catalog.repository import JobCatalog, SalaryTable
from jobinfo.chat.llm import LanguageModelClient
from jobinfo.chat.rag import RAGService
from jobinfo.config import Settings
from jobinfo.models.schema import JobDescription, SalaryRecord

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class FakeLLM(LanguageModelClient):
    """Records every call and replies with a canned answer or raises."""

    name = "fake"

    def __init__(self, reply: str = "Here is what I know.", error: Optional[BaseException] = None, delay: float = 0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls: List[Tuple[str, str]] = []

    async def complete(self, system_instruction: str, user_content: str) -> str:
        self.calls.append((system_instruction, user_content))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


def make_settings(**overrides) -> Settings:
    values = dict(
        llm_provider="gemini",
        gemini_api_key=None,
        openai_api_key=None,
        llm_timeout_seconds=5.0,
        job_descriptions_path=str(DATA_DIR / "job-descriptions.json"),
        salaries_path=str(DATA_DIR / "salaries.json"),
        match_profile="strict",
        strict_threshold=0.3,
        lenient_threshold=0.6,
        min_word_length=4,
        min_fragment_length=3,
        salary_is_stop_word=True,
        log_level="INFO",
        log_format="key-value",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def jobs() -> List[JobDescription]:
    return [
        JobDescription(
            jurisdiction="Ventura",
            code="02193",
            title="Assistant Sheriff",
            description="Assists the Sheriff in directing the Sheriff's Office.",
        ),
        JobDescription(
            jurisdiction="Ventura",
            code="00780",
            title="Deputy Sheriff",
            description="Performs patrol and law enforcement work.",
        ),
        JobDescription(
            jurisdiction="Ventura",
            code="01175",
            title="Accounting Technician",
            description="Performs technical accounting work.",
        ),
        JobDescription(
            jurisdiction="San Bernardino",
            code="07622",
            title="Librarian I",
            description="Provides professional library services.",
        ),
        JobDescription(
            jurisdiction="San Bernardino",
            code="02193",
            title="Equipment Operator",
            description="Operates heavy equipment on county roads.",
        ),
    ]


@pytest.fixture
def catalog(jobs) -> JobCatalog:
    return JobCatalog(jobs)


@pytest.fixture
def salary_table() -> SalaryTable:
    return SalaryTable(
        [
            SalaryRecord(jurisdiction="Ventura", job_code="02193", grade1="G1", grade2="G2"),
            SalaryRecord(jurisdiction="Ventura", job_code="00780", grade1="$41.27", grade2="$57.82"),
            SalaryRecord(jurisdiction="San Bernardino", job_code="07622", grade1="$27.90", grade2="$37.47"),
            SalaryRecord(jurisdiction="San Bernardino", job_code="02193", grade1="SB1", grade2="SB2"),
        ]
    )


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM(reply="The Assistant Sheriff earns between G1 and G2.")


@pytest.fixture
def service(catalog, salary_table, fake_llm, settings) -> RAGService:
    return RAGService(catalog, salary_table, fake_llm, settings)
