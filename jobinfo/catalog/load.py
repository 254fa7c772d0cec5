import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from jobinfo.config import Settings, get_settings
from jobinfo.errors import CatalogLoadError
from jobinfo.models.schema import JobDescription, SalaryRecord
from .repository import JobCatalog, SalaryTable

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_json_array(path: Path) -> List[dict]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError(str(path), "file not found") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except OSError as e:
        raise CatalogLoadError(str(path), str(e)) from e

    if not isinstance(data, list):
        raise CatalogLoadError(str(path), "expected a JSON array of records")
    return data


def _parse_rows(path: Path, rows: List[dict], model: Type[ModelT]) -> List[ModelT]:
    parsed: List[ModelT] = []
    for idx, row in enumerate(rows):
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            raise CatalogLoadError(str(path), f"row {idx} is not a valid {model.__name__}: {e}") from e
    return parsed


def load_catalog(path: str | Path) -> JobCatalog:
    path = Path(path)
    jobs = _parse_rows(path, read_json_array(path), JobDescription)
    catalog = JobCatalog(jobs)
    logger.info(
        "Job catalog loaded",
        extra={"path": str(path), "jobs": len(catalog), "jurisdictions": len(catalog.jurisdictions)},
    )
    return catalog


def load_salary_table(path: str | Path) -> SalaryTable:
    path = Path(path)
    records = _parse_rows(path, read_json_array(path), SalaryRecord)
    table = SalaryTable(records)
    logger.info("Salary table loaded", extra={"path": str(path), "records": len(table)})
    return table


def load_tables(settings: Settings) -> Tuple[JobCatalog, SalaryTable]:
    return load_catalog(settings.job_descriptions_path), load_salary_table(settings.salaries_path)


def main():
    parser = argparse.ArgumentParser(description="Validate the job catalog and salary data files.")
    parser.add_argument("--jobs", type=str, default=None)
    parser.add_argument("--salaries", type=str, default=None)
    args = parser.parse_args()

    settings = get_settings()
    try:
        catalog = load_catalog(args.jobs or settings.job_descriptions_path)
        table = load_salary_table(args.salaries or settings.salaries_path)
    except CatalogLoadError as e:
        print(f"[load] {e}", file=sys.stderr)
        raise SystemExit(1)

    with_salary = sum(1 for job in catalog if table.lookup(job.code, job.jurisdiction) is not None)
    print(f"[load] {len(catalog)} jobs across {len(catalog.jurisdictions)} jurisdictions")
    print(f"[load] {len(table)} salary records; {with_salary}/{len(catalog)} jobs have a salary entry")


if __name__ == "__main__":
    main()
