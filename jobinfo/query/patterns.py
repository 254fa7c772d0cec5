import re
from dataclasses import dataclass
from typing import Pattern, Tuple


@dataclass(frozen=True)
class PhraseRule:
    name: str
    pattern: Pattern[str]
    replacement: str = ""


def _rule(name: str, regex: str) -> PhraseRule:
    return PhraseRule(name=name, pattern=re.compile(regex, re.IGNORECASE))


# Leading question phrasing, most specific first. Only the first rule that
# matches is applied to a query.
LEADING_PHRASE_RULES: Tuple[PhraseRule, ...] = (
    _rule(
        "ksa_with_knowledge",
        r"^what\s+are\s+(?:the\s+)?(?:knowledge[\s,]+)?skills\s+(?:and\s+)?(?:knowledge[\s,]+)?abilities\s+(?:for\s+)?",
    ),
    _rule("skills_and_abilities", r"^what\s+are\s+(?:the\s+)?skills\s+(?:and\s+)?abilities\s+(?:for\s+)?"),
    _rule("tell_me_salary", r"^tell\s+me\s+(?:about\s+)?(?:the\s+)?salary\s+(?:of|for)\s+"),
    _rule("tell_me_about", r"^tell\s+me\s+(?:about\s+)?"),
    _rule("show_find_search", r"^(?:show|find|search|look)\s+(?:me|for|up)\s+"),
    _rule("what_is_salary", r"^what\s+is\s+(?:the\s+)?(?:salary\s+(?:of|for)\s+)?"),
)

FILLER_WORDS: Tuple[str, ...] = (
    "position",
    "job",
    "role",
    "county",
    "department",
    "knowledge",
    "skills",
    "abilities",
)

FILLER_PATTERN: Pattern[str] = re.compile(
    r"\b(?:" + "|".join(FILLER_WORDS) + r")\b", re.IGNORECASE
)

PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()"
PUNCTUATION_PATTERN: Pattern[str] = re.compile(r"[.,/#!$%\^&*;:{}=\-_`~()]")
