import logging
from typing import AbstractSet, Optional

from jobinfo.catalog.repository import JobCatalog
from .normalize import DEFAULT_STOP_WORDS, normalize

logger = logging.getLogger(__name__)


class TitleExtractor:
    """Turns a raw question into a job-title fragment for the matcher.

    Jurisdiction names are taken from the catalog so that "in Ventura" or
    "Ventura County" never end up in the fragment.
    """

    def __init__(self, catalog: JobCatalog, stop_words: Optional[AbstractSet[str]] = None) -> None:
        self.jurisdictions = catalog.jurisdictions
        self.stop_words = stop_words if stop_words is not None else DEFAULT_STOP_WORDS

    def extract(self, query: str) -> str:
        fragment = normalize(query, self.jurisdictions, self.stop_words)
        logger.debug("Extracted title fragment", extra={"query": query, "fragment": fragment})
        return fragment
