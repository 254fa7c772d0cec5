"""Read-only in-memory tables for job descriptions and salary grades.

Both tables are built once at startup and handed to the query pipeline.
They hold tuples of frozen models, so nothing downstream can mutate them.
"""

from typing import Iterable, Iterator, Optional, Tuple

from jobinfo.matching.salary import lookup_salary
from jobinfo.models.schema import JobDescription, SalaryRecord


class JobCatalog:
    """Ordered, immutable sequence of job descriptions searchable by title."""

    def __init__(self, jobs: Iterable[JobDescription]) -> None:
        self._jobs: Tuple[JobDescription, ...] = tuple(jobs)
        seen = []
        for job in self._jobs:
            name = job.jurisdiction.strip()
            if name and name.lower() not in (s.lower() for s in seen):
                seen.append(name)
        self._jurisdictions: Tuple[str, ...] = tuple(seen)

    def __iter__(self) -> Iterator[JobDescription]:
        return iter(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def __getitem__(self, index: int) -> JobDescription:
        return self._jobs[index]

    @property
    def jurisdictions(self) -> Tuple[str, ...]:
        """Distinct jurisdiction names in first-seen order."""
        return self._jurisdictions


class SalaryTable:
    """Ordered, immutable sequence of salary records keyed by job code."""

    def __init__(self, records: Iterable[SalaryRecord]) -> None:
        self._records: Tuple[SalaryRecord, ...] = tuple(records)

    def __iter__(self) -> Iterator[SalaryRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def lookup(self, code: str, jurisdiction: Optional[str] = None) -> Optional[SalaryRecord]:
        return lookup_salary(code, self, jurisdiction=jurisdiction)
