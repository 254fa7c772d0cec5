"""Reduce a free-text question to a short job-title fragment.

The steps run in a fixed order:

1. lower-case
2. strip one leading question phrase (first matching rule wins), matched
   against the text with step-6 punctuation already removed
3. drop filler words such as "position" or "department"
4. drop jurisdiction mentions ("ventura", "in ventura", "ventura county")
5. drop stop words
6. strip punctuation, collapse whitespace, trim a leading/trailing "the"

An empty string is a normal result for questions without a title in them.
"""

import re
from functools import lru_cache
from typing import AbstractSet, Iterable, Pattern, Sequence, Tuple

from jobinfo.config import BASE_STOP_WORDS
from .patterns import (
    FILLER_PATTERN,
    LEADING_PHRASE_RULES,
    PUNCTUATION,
    PUNCTUATION_PATTERN,
    PhraseRule,
)

DEFAULT_STOP_WORDS = BASE_STOP_WORDS | {"salary"}

_WHITESPACE = re.compile(r"\s+")
_LEADING_THE = re.compile(r"^the\s+")
_TRAILING_THE = re.compile(r"\s+the$")
_TRAILING_COUNTY = re.compile(r"\s+county$")


def strip_first_match(text: str, rules: Sequence[PhraseRule]) -> str:
    """Apply the first rule whose pattern matches ``text`` and skip the rest."""
    for rule in rules:
        stripped, count = rule.pattern.subn(rule.replacement, text, count=1)
        if count:
            return stripped.strip()
    return text


@lru_cache(maxsize=32)
def jurisdiction_patterns(jurisdictions: Tuple[str, ...]) -> Tuple[Pattern[str], ...]:
    patterns = []
    for name in jurisdictions:
        base = _TRAILING_COUNTY.sub("", name.strip().lower())
        if not base:
            continue
        body = r"\s+".join(re.escape(part) for part in base.split())
        # covers "<j>", "in <j>" and "<j> county"
        patterns.append(re.compile(rf"\b(?:in\s+)?{body}(?:\s+county)?\b", re.IGNORECASE))
    return tuple(patterns)


def remove_jurisdictions(text: str, jurisdictions: Iterable[str]) -> str:
    for pattern in jurisdiction_patterns(tuple(jurisdictions)):
        text = pattern.sub(" ", text)
    return text


def remove_stop_words(text: str, stop_words: AbstractSet[str]) -> str:
    kept = [tok for tok in text.split() if tok.strip(PUNCTUATION + "?") not in stop_words]
    return " ".join(kept)


def strip_punctuation(text: str) -> str:
    return PUNCTUATION_PATTERN.sub("", text.replace("?", ""))


def clean_fragment(text: str) -> str:
    text = strip_punctuation(text)
    text = _WHITESPACE.sub(" ", text).strip()
    text = _LEADING_THE.sub("", text)
    text = _TRAILING_THE.sub("", text)
    return text.strip()


def normalize(
    raw: str,
    jurisdictions: Iterable[str] = (),
    stop_words: AbstractSet[str] = DEFAULT_STOP_WORDS,
) -> str:
    text = strip_punctuation(raw.lower()).strip()
    text = strip_first_match(text, LEADING_PHRASE_RULES)
    text = FILLER_PATTERN.sub(" ", text)
    text = remove_jurisdictions(text, jurisdictions)
    text = remove_stop_words(text, stop_words)
    return clean_fragment(text)
