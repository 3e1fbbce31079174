import re
from collections import Counter
from typing import Iterable, List

from .vocab import SENIORITY_TIERS, SKILL_CATALOG, STOP_WORDS

MAX_KEYWORDS = 25
MIN_KEYWORD_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]")

# All three are scanned; each match contributes its leading number.
YEAR_PATTERNS = [
    re.compile(r"(\d+)\s*\+\s*years?"),
    re.compile(r"(\d+)\s*-\s*(\d+)\s*years?"),
    re.compile(r"(\d+)\s*years?"),
]


def tokenize(text: str) -> List[str]:
    """Lower-case word tokens with punctuation treated as whitespace."""
    return _NON_WORD.sub(" ", text.lower()).split()


def extract_keywords(text: str, stop_words: Iterable[str] = STOP_WORDS,
                     limit: int = MAX_KEYWORDS) -> List[str]:
    """
    Most frequent content words of a document, highest count first.

    Tokens shorter than three characters and stop words are dropped.
    Equal counts keep the order in which the words first appeared.
    """
    stop = stop_words if isinstance(stop_words, (set, frozenset)) else set(stop_words)
    counts = Counter(
        word for word in tokenize(text)
        if len(word) >= MIN_KEYWORD_LENGTH and word not in stop
    )
    # Counter preserves insertion order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:limit]]


def extract_skills(text: str, catalog: Iterable[str] = SKILL_CATALOG) -> List[str]:
    # Plain substring test, so "java" is also found inside "javascript"
    text_lower = text.lower()
    return [skill for skill in catalog if skill.lower() in text_lower]


def extract_experience_years(text: str) -> int:
    """Largest "N years" style figure in the text, else a seniority estimate."""
    text_lower = text.lower()

    max_years = 0
    for pattern in YEAR_PATTERNS:
        for match in pattern.finditer(text_lower):
            try:
                years = int(match.group(1))
            except ValueError:
                # digit run longer than the interpreter's int conversion limit
                continue
            max_years = max(max_years, years)

    if max_years == 0:
        for words, years in SENIORITY_TIERS:
            if any(w in text_lower for w in words):
                return years

    return max_years
