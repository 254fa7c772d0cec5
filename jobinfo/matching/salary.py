import logging
from typing import Iterable, Optional

from jobinfo.models.schema import SalaryRecord

logger = logging.getLogger(__name__)


def lookup_salary(
    code: str,
    table: Iterable[SalaryRecord],
    jurisdiction: Optional[str] = None,
) -> Optional[SalaryRecord]:
    """Return the salary record for a job code, or None when there is none.

    Codes are compared exactly (case-sensitive). Codes are not guaranteed to be
    unique across jurisdictions, so when ``jurisdiction`` is given a record from
    that jurisdiction is preferred; otherwise the first record carrying the code
    in table order is returned.
    """
    first: Optional[SalaryRecord] = None
    wanted = jurisdiction.strip().lower() if jurisdiction else None
    for record in table:
        if record.job_code != code:
            continue
        if wanted is None or record.jurisdiction.strip().lower() == wanted:
            return record
        if first is None:
            first = record

    if first is not None:
        logger.warning(
            "Salary code has no record in the job's jurisdiction; using first match",
            extra={"job_code": code, "jurisdiction": jurisdiction, "salary_jurisdiction": first.jurisdiction},
        )
    return first
