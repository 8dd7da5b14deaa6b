from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_vibe_remover.rewrite import RewriteOptions


class VibeRemoverColumnConfig(SingleColumnConfig):
    """Rewrite text columns to tone down AI-sounding signals, with before/after scores.

    Each row's target columns are joined, scored, run through the enabled rewrite
    passes, and scored again. Scores run 0-100, higher meaning more AI-like.

    Attributes:
        target_columns: Columns whose text content will be concatenated and rewritten.
        max_score: Maximum rewritten score (0-100) for ``is_valid=True``.
        include_analysis: Include the full before/after analysis payloads and deltas.
        include_advice: Include advice strings for signals still flagged after the rewrite.
    """

    target_columns: list[str]
    reduce_emojis: bool = Field(default=True, description="Strip emojis")
    limit_em_dashes: bool = Field(default=True, description="Replace em dashes with commas")
    simplify_transitions: bool = Field(default=True, description="Drop formal transitions like 'moreover'")
    use_contractions: bool = Field(default=True, description="Contract 'do not' to \"don't\" and similar")
    vary_sentence_length: bool = Field(default=True, description="Merge short and split long sentences")
    replace_buzzwords: bool = Field(default=True, description="Swap buzzwords and cliches for plain words")
    jitter_syntax: bool = Field(default=False, description="Vary 'also', 'then', and 'so'")
    max_score: int = Field(default=40, ge=0, le=100, description="Maximum rewritten score for is_valid=True")
    include_analysis: bool = Field(default=False, description="Include before/after analysis payloads in output")
    include_advice: bool = Field(default=True, description="Include advice strings in output")
    column_type: Literal["vibe-remover"] = "vibe-remover"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001fa84"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []

    @property
    def rewrite_options(self) -> RewriteOptions:
        return RewriteOptions(
            reduce_emojis=self.reduce_emojis,
            limit_em_dashes=self.limit_em_dashes,
            simplify_transitions=self.simplify_transitions,
            use_contractions=self.use_contractions,
            vary_sentence_length=self.vary_sentence_length,
            replace_buzzwords=self.replace_buzzwords,
            jitter_syntax=self.jitter_syntax,
        )
