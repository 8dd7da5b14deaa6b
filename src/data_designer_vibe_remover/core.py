# Shared constants and text helpers for the vibe remover.
#
# Everything here is immutable module-level state: the Hyperparameters
# defaults, the compiled patterns, and the sentence/word helpers used by both
# the analyzer and the rewriter.

from __future__ import annotations

import math
import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Scoring weights, rewrite thresholds, and advisory limits."""

    # Composite score weights
    emoji_weight: float = 5
    em_dash_weight: float = 7
    cliche_weight: float = 6
    buzzword_weight: float = 3
    sentence_length_weight: float = 1.0
    repetition_weight: float = 40.0
    score_min: int = 0
    score_max: int = 100

    # Nth occurrence of a token at which it starts counting as a repeat
    repeat_min_occurrence: int = 3

    # Sentence-length variation
    merge_max_words: int = 5
    split_min_words: int = 28

    # Advice thresholds (a signal is flagged when strictly above)
    emoji_warn_above: int = 2
    em_dash_warn_above: int = 1
    cliche_warn_above: int = 0
    buzzword_warn_above: int = 0
    repetition_warn_above: float = 0.25


DEFAULT_HYPERPARAMETERS = Hyperparameters()

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

EM_DASH = "—"

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def is_blank(text: str | None) -> bool:
    return not text or not text.strip()


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text)


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, keeping terminal punctuation attached.

    Whitespace runs are collapsed first, so a boundary is any ``.``, ``!`` or
    ``?`` followed by a space. Empty fragments are dropped.
    """
    normalized = collapse_whitespace(text).strip()
    return [s for s in _SENTENCE_BOUNDARY_RE.split(normalized) if s]


def words(text: str) -> list[str]:
    return text.split()


def word_count(text: str) -> int:
    return len(text.split())


def whole_word_pattern(phrase: str, flags: int = re.IGNORECASE) -> re.Pattern[str]:
    """Compile a pattern matching ``phrase`` only between word boundaries."""
    return re.compile(r"\b" + re.escape(phrase) + r"\b", flags)


def round_half_up(value: float, digits: int = 0) -> float:
    # round() is banker's rounding; scores must round .5 upward
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
