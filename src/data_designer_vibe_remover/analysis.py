# Heuristic scorer for AI-sounding surface signals.
#
# Counts emojis, em dashes, cliches and buzzwords, measures sentence length
# and token repetition, and folds them into a 0-100 score where higher means
# more machine-like. Stateless: every call works on its own input only.

from __future__ import annotations

from dataclasses import asdict, dataclass

import emoji

from data_designer_vibe_remover.core import (
    DEFAULT_HYPERPARAMETERS,
    EM_DASH,
    Hyperparameters,
    is_blank,
    round_half_up,
    split_sentences,
    whole_word_pattern,
    word_count,
)
from data_designer_vibe_remover.lexicon import BUZZWORDS, CLICHE_PHRASES

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnalysisResult:
    emoji_count: int = 0
    em_dash_count: int = 0
    cliche_count: int = 0
    buzzword_count: int = 0
    avg_sentence_length: float = 0.0
    repetition_ratio: float = 0.0
    score: int = 0

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_ANALYSIS

    def to_payload(self) -> dict[str, object]:
        return {"type": "AnalysisResult", **asdict(self)}


EMPTY_ANALYSIS = AnalysisResult()

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

_CLICHE_RES = [whole_word_pattern(p, flags=0) for p in CLICHE_PHRASES]
_BUZZWORD_RES = [whole_word_pattern(p, flags=0) for p in BUZZWORDS]

# ---------------------------------------------------------------------------
# Signal counters
# ---------------------------------------------------------------------------


def _count_matches(lowered: str, patterns: list) -> int:
    return sum(len(pat.findall(lowered)) for pat in patterns)


def _avg_sentence_length(text: str) -> float:
    lengths = [word_count(s) for s in split_sentences(text)]
    if not lengths:
        return 0.0
    return round_half_up(sum(lengths) / len(lengths), 1)


def _repetition_ratio(lowered: str, hp: Hyperparameters) -> float:
    tokens = lowered.split()
    if not tokens:
        return 0.0
    seen: dict[str, int] = {}
    repeats = 0
    for token in tokens:
        seen[token] = seen.get(token, 0) + 1
        if seen[token] >= hp.repeat_min_occurrence:
            repeats += 1
    return min(1.0, repeats / len(tokens))


def _score(
    emojis: int,
    em_dashes: int,
    cliches: int,
    buzzwords: int,
    avg_sentence_length: float,
    repetition_ratio: float,
    hp: Hyperparameters,
) -> int:
    raw = (
        emojis * hp.emoji_weight
        + em_dashes * hp.em_dash_weight
        + cliches * hp.cliche_weight
        + buzzwords * hp.buzzword_weight
        + avg_sentence_length * hp.sentence_length_weight
        + repetition_ratio * hp.repetition_weight
    )
    return max(hp.score_min, int(round_half_up(min(hp.score_max, raw))))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_text(text: str, hyperparameters: Hyperparameters | None = None) -> AnalysisResult:
    """Score text for AI-sounding surface signals.

    The score is ``emojis*5 + em_dashes*7 + cliches*6 + buzzwords*3 +
    avg_sentence_length*1 + repetition_ratio*40``, capped at 100 and rounded
    half-up to an integer (weights are overridable through
    ``hyperparameters``).

    Args:
        text: The prose to analyze. Empty, blank, or ``None`` input yields
            ``EMPTY_ANALYSIS``.
        hyperparameters: Optional weight and threshold overrides.

    Returns:
        A fresh, immutable ``AnalysisResult``.
    """
    if is_blank(text):
        return EMPTY_ANALYSIS
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS

    lowered = text.lower()
    emojis = emoji.emoji_count(text)
    em_dashes = text.count(EM_DASH)
    cliches = _count_matches(lowered, _CLICHE_RES)
    buzzwords = _count_matches(lowered, _BUZZWORD_RES)
    avg_len = _avg_sentence_length(text)
    repetition = _repetition_ratio(lowered, hp)

    return AnalysisResult(
        emoji_count=emojis,
        em_dash_count=em_dashes,
        cliche_count=cliches,
        buzzword_count=buzzwords,
        avg_sentence_length=avg_len,
        repetition_ratio=repetition,
        score=_score(emojis, em_dashes, cliches, buzzwords, avg_len, repetition, hp),
    )


def advise(result: AnalysisResult, hyperparameters: Hyperparameters | None = None) -> list[str]:
    """Return one advice line per signal that is above its warn threshold."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    advice: list[str] = []
    if result.emoji_count > hp.emoji_warn_above:
        advice.append(f"{result.emoji_count} emojis. Keep only the ones that carry meaning.")
    if result.em_dash_count > hp.em_dash_warn_above:
        advice.append(f"{result.em_dash_count} em dashes. Use commas, periods, or parentheses instead.")
    if result.cliche_count > hp.cliche_warn_above:
        advice.append(f"{result.cliche_count} cliched transitions. State the point directly.")
    if result.buzzword_count > hp.buzzword_warn_above:
        advice.append(f"{result.buzzword_count} buzzwords. Say what you specifically mean.")
    if result.repetition_ratio > hp.repetition_warn_above:
        advice.append(f"{result.repetition_ratio:.0%} of words are repeats. Vary your wording.")
    return advice


def compare(before: AnalysisResult, after: AnalysisResult) -> dict[str, float]:
    """Per-field change from ``before`` to ``after`` (negative is an improvement)."""
    old, new = asdict(before), asdict(after)
    deltas: dict[str, float] = {}
    for key, value in new.items():
        delta = value - old[key]
        deltas[key] = round(delta, 4) if isinstance(delta, float) else delta
    return deltas
