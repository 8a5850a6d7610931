"""
Match Evaluator - Decide whether a query matches a panel.

Each word is "satisfied" when the panel's corpus contains it as an exact
substring, or failing that when the fuzzy strategy reports a match. The
per-word results are combined under the filter mode:

  - ANY ("or"): at least one word must be satisfied
  - ALL ("and"): every word must be satisfied

Fuzzy matching uses rapidfuzz partial_ratio, which scores the best
alignment of the word against any window of the corpus.
"""

from enum import Enum
from typing import Callable, Optional, Sequence

from loguru import logger
from rapidfuzz import fuzz

from infowall.search.records import PanelRecord

# fuzzy(word, corpus) -> bool, both arguments already case-folded
FuzzyStrategy = Callable[[str, str], bool]

DEFAULT_FUZZY_THRESHOLD = 75


class FilterMode(Enum):
    """Aggregation policy across query words."""
    ALL = "and"
    ANY = "or"

    @classmethod
    def from_setting(cls, value) -> "FilterMode":
        """Resolve a settings value ("and"/"or"), falling back to ANY."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.warning(f"Unknown filter mode {value!r}, using 'or'")
            return cls.ANY


class RapidfuzzMatcher:
    """Fuzzy substring test backed by rapidfuzz."""

    def __init__(self, threshold: int = DEFAULT_FUZZY_THRESHOLD):
        self.threshold = threshold

    def __call__(self, word: str, corpus: str) -> bool:
        # partial_ratio slides the shorter string over the longer one, so a
        # word longer than the corpus would be scored the wrong way round
        if not word or len(word) > len(corpus):
            return False
        score = fuzz.partial_ratio(word, corpus, score_cutoff=self.threshold)
        return score >= self.threshold


def word_satisfied(word: str, corpus: str, fuzzy: Optional[FuzzyStrategy] = None) -> bool:
    """
    Check one case-folded word against a case-folded corpus.

    A fuzzy strategy that raises is logged and counts as no match, so
    exact matching keeps working without it.
    """
    if word in corpus:
        return True
    if fuzzy is None:
        return False

    try:
        return bool(fuzzy(word, corpus))
    except Exception:
        logger.exception(f"Fuzzy match failed for '{word}'")
        return False


def matches(
    panel: PanelRecord,
    words: Sequence[str],
    mode: FilterMode,
    fuzzy: Optional[FuzzyStrategy] = None,
) -> bool:
    """
    Evaluate query words against a panel's cached corpus.

    Words are compared case-insensitively and evaluated once per
    occurrence. An empty word list is true under ALL and false under ANY.

    Args:
        panel: Panel record with its cached corpus
        words: Query words from tokenize()
        mode: FilterMode.ALL or FilterMode.ANY
        fuzzy: Optional fuzzy strategy, exact matching only when None

    Returns:
        True if the panel should be visible for these words
    """
    results = (word_satisfied(word.casefold(), panel.corpus, fuzzy) for word in words)

    if mode is FilterMode.ALL:
        return all(results)
    if mode is FilterMode.ANY:
        return any(results)
    raise ValueError(f"Unsupported filter mode: {mode!r}")
