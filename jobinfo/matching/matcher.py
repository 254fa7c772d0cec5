"""Staged matching of a title fragment against the job catalog.

Stages run in order and stop at the first hit:

1. exact: case-insensitive equality with a catalog title
2. substring: the fragment contains a title, or a title contains the fragment
3. fuzzy: best edit-distance score at or below the profile's threshold

Two fuzzy profiles are supported. ``strict`` scores every title against a
tight threshold. ``lenient`` first keeps only titles sharing a long word with
the fragment and then scores those against a looser threshold.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from rapidfuzz import fuzz

from jobinfo.catalog.repository import JobCatalog
from jobinfo.models.schema import JobDescription

logger = logging.getLogger(__name__)

STRICT = "strict"
LENIENT = "lenient"

DEFAULT_THRESHOLDS = {STRICT: 0.3, LENIENT: 0.6}


def title_distance(fragment: str, title: str) -> float:
    """Normalized edit distance between two titles: 0.0 identical, 1.0 unrelated.

    Tokens are sorted before comparison, so "sheriff deputy" and
    "deputy sheriff" score 0.0.
    """
    ratio = fuzz.token_sort_ratio(fragment.lower(), title.lower())
    return round(1.0 - ratio / 100.0, 4)


@dataclass(frozen=True)
class MatchResult:
    job: Optional[JobDescription]
    stage: Optional[str] = None
    score: Optional[float] = None


NO_MATCH = MatchResult(job=None)


class CatalogMatcher:
    def __init__(
        self,
        catalog: JobCatalog,
        profile: str = STRICT,
        threshold: Optional[float] = None,
        min_word_length: int = 4,
        min_fragment_length: int = 3,
    ) -> None:
        if profile not in DEFAULT_THRESHOLDS:
            raise ValueError(f"Unknown match profile: {profile}")
        self.catalog = catalog
        self.profile = profile
        self.threshold = DEFAULT_THRESHOLDS[profile] if threshold is None else threshold
        self.min_word_length = min_word_length
        self.min_fragment_length = min_fragment_length

    def match(self, fragment: str) -> Optional[JobDescription]:
        return self.match_with_stage(fragment).job

    def match_with_stage(self, fragment: str) -> MatchResult:
        needle = fragment.strip().lower()
        if not needle:
            return NO_MATCH

        for job in self.catalog:
            if job.title.strip().lower() == needle:
                return self._found(job, "exact", 0.0, fragment)

        # short fragments only ever match exactly
        if len(needle) < self.min_fragment_length:
            return NO_MATCH

        for job in self.catalog:
            title = job.title.strip().lower()
            if title and (title in needle or needle in title):
                return self._found(job, "substring", 0.0, fragment)

        candidates: Iterable[JobDescription] = self.catalog
        if self.profile == LENIENT:
            candidates = self._share_long_word(needle)

        best = self._best_fuzzy(needle, candidates)
        if best is not None:
            job, score = best
            return self._found(job, "fuzzy", score, fragment)

        logger.info(
            "No catalog entry matched fragment",
            extra={"fragment": fragment, "profile": self.profile, "threshold": self.threshold},
        )
        return NO_MATCH

    def _share_long_word(self, needle: str) -> List[JobDescription]:
        words = [w for w in needle.split() if len(w) >= self.min_word_length]
        if not words:
            return []
        return [job for job in self.catalog if any(w in job.title.lower() for w in words)]

    def _best_fuzzy(
        self, needle: str, candidates: Iterable[JobDescription]
    ) -> Optional[Tuple[JobDescription, float]]:
        best: Optional[Tuple[JobDescription, float]] = None
        for job in candidates:
            score = title_distance(needle, job.title)
            if score > self.threshold:
                continue
            # strict "<" keeps the earliest entry on ties
            if best is None or score < best[1]:
                best = (job, score)
        return best

    def _found(self, job: JobDescription, stage: str, score: float, fragment: str) -> MatchResult:
        logger.debug(
            "Matched catalog entry",
            extra={"fragment": fragment, "stage": stage, "score": score, "code": job.code, "title": job.title},
        )
        return MatchResult(job=job, stage=stage, score=score)
