# Rule-based rewriter that tones down AI-sounding surface signals.
#
# Passes run in a fixed order, each on the previous pass's output, and a
# cleanup step always runs last. Every pass is a plain str -> str function.

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Callable

import emoji

from data_designer_vibe_remover.core import (
    DEFAULT_HYPERPARAMETERS,
    Hyperparameters,
    collapse_whitespace,
    is_blank,
    split_sentences,
    whole_word_pattern,
    words,
)
from data_designer_vibe_remover.lexicon import (
    BUZZWORD_REPLACEMENTS,
    CLICHE_REPLACEMENTS,
    CONTRACTION_RULES,
    FORMAL_TRANSITIONS,
    SYNTAX_JITTER,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RewriteOptions:
    """Independent switches, one per rewrite pass. All off by default."""

    reduce_emojis: bool = False
    limit_em_dashes: bool = False
    simplify_transitions: bool = False
    use_contractions: bool = False
    vary_sentence_length: bool = False
    replace_buzzwords: bool = False
    jitter_syntax: bool = False

    @classmethod
    def recommended(cls) -> RewriteOptions:
        return cls(
            reduce_emojis=True,
            limit_em_dashes=True,
            simplify_transitions=True,
            use_contractions=True,
            vary_sentence_length=True,
            replace_buzzwords=True,
        )

    @classmethod
    def all_enabled(cls) -> RewriteOptions:
        return cls(**{f.name: True for f in fields(cls)})

    def enabled(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name)]


# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------


def _compile_table(table: tuple[tuple[str, str], ...]) -> list[tuple[re.Pattern[str], str]]:
    return [(whole_word_pattern(phrase), replacement) for phrase, replacement in table]


_BUZZWORD_SUBS = _compile_table(BUZZWORD_REPLACEMENTS)
_CLICHE_SUBS = _compile_table(CLICHE_REPLACEMENTS)
_CONTRACTION_SUBS = _compile_table(CONTRACTION_RULES)
# Trailing commas and spaces go with the transition word
_TRANSITION_SUBS = [
    (re.compile(r"\b" + re.escape(word) + r"\b[,\s]*", re.IGNORECASE), replacement)
    for word, replacement in FORMAL_TRANSITIONS
]
_JITTER_SUBS = _compile_table(SYNTAX_JITTER)

_KEYCAP = "\u20e3"
_EM_DASH_RE = re.compile(r"\s*—\s*")
_COMMA_RUN_RE = re.compile(r",{2,}")
_TRAILING_TERMINAL_RE = re.compile(r"[.!?]+\Z")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.;!?])")
_REPEATED_TERMINAL_RE = re.compile(r"([.!?])\1+")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")

# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------


def _apply_table(text: str, subs: list[tuple[re.Pattern[str], str]]) -> str:
    for pattern, replacement in subs:
        text = pattern.sub(replacement, text)
    return text


def _keep_keycap_base(chars: str, _data: dict) -> str:
    # keycap sequences like 1\ufe0f\u20e3 keep their ASCII digit, # or *
    return chars[0] if chars.endswith(_KEYCAP) else ""


def strip_emojis(text: str) -> str:
    return emoji.replace_emoji(text, replace=_keep_keycap_base)


def limit_em_dashes(text: str) -> str:
    return _COMMA_RUN_RE.sub(",", _EM_DASH_RE.sub(", ", text))


def replace_buzzwords(text: str) -> str:
    return _apply_table(_apply_table(text, _BUZZWORD_SUBS), _CLICHE_SUBS)


def use_contractions(text: str) -> str:
    return _apply_table(text, _CONTRACTION_SUBS)


def simplify_transitions(text: str) -> str:
    return _apply_table(text, _TRANSITION_SUBS)


def vary_sentence_length(text: str, hyperparameters: Hyperparameters | None = None) -> str:
    """Merge very short sentences into their predecessor and halve very long ones."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    out: list[str] = []
    for sentence in split_sentences(text):
        tokens = words(sentence)
        if len(tokens) <= hp.merge_max_words and out:
            out[-1] = _TRAILING_TERMINAL_RE.sub("", out[-1]) + ", " + sentence.lower()
        elif len(tokens) >= hp.split_min_words:
            mid = len(tokens) // 2
            out.append(" ".join(tokens[:mid]) + ".")
            out.append(" ".join(tokens[mid:]))
        else:
            out.append(sentence)
    return collapse_whitespace(" ".join(out))


def jitter_syntax(text: str) -> str:
    return _apply_table(text, _JITTER_SUBS)


def cleanup(text: str) -> str:
    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    text = _REPEATED_TERMINAL_RE.sub(r"\1", text)
    text = _MULTI_SPACE_RE.sub(" ", text)
    return text.strip()


# ---------------------------------------------------------------------------
# Pipeline wiring
# ---------------------------------------------------------------------------

_Pass = Callable[[str, Hyperparameters], str]


def _wrap(simple_pass: Callable[[str], str]) -> _Pass:
    def _pass(text: str, _hp: Hyperparameters) -> str:
        return simple_pass(text)
    return _pass


_PIPELINE: list[tuple[str, _Pass]] = [
    ("reduce_emojis", _wrap(strip_emojis)),
    ("limit_em_dashes", _wrap(limit_em_dashes)),
    ("replace_buzzwords", _wrap(replace_buzzwords)),
    ("use_contractions", _wrap(use_contractions)),
    ("simplify_transitions", _wrap(simplify_transitions)),
    ("vary_sentence_length", vary_sentence_length),
    ("jitter_syntax", _wrap(jitter_syntax)),
]

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def rewrite_text(
    text: str,
    options: RewriteOptions,
    hyperparameters: Hyperparameters | None = None,
) -> str:
    """Apply the enabled rewrite passes in their fixed order, then clean up.

    Order: emojis, em dashes, buzzwords and cliches, contractions, formal
    transitions, sentence length, syntax jitter. Cleanup always runs.

    Args:
        text: The prose to rewrite. Empty, blank, or ``None`` input yields ``""``.
        options: Which passes to run.
        hyperparameters: Optional overrides for the merge/split thresholds.

    Returns:
        The rewritten text. Output is best-effort and not guaranteed to be
        grammatical.
    """
    if is_blank(text):
        return ""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS

    result = text.strip()
    for name, rewrite_pass in _PIPELINE:
        if getattr(options, name):
            logger.debug(f"applying rewrite pass {name!r}")
            result = rewrite_pass(result, hp)
    return cleanup(result)
