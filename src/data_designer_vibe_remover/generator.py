from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_vibe_remover.analysis import advise, analyze_text, compare
from data_designer_vibe_remover.config import VibeRemoverColumnConfig
from data_designer_vibe_remover.rewrite import RewriteOptions, rewrite_text

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def humanize_row(
    text: str,
    options: RewriteOptions,
    max_score: int,
    include_analysis: bool = False,
    include_advice: bool = True,
) -> dict:
    """Analyze, rewrite, and re-analyze one row's text."""
    before = analyze_text(text)
    rewritten = rewrite_text(text, options)
    after = analyze_text(rewritten)
    output: dict = {
        "text": rewritten,
        "is_valid": after.score <= max_score,
        "score_before": before.score,
        "score_after": after.score,
    }
    if include_analysis:
        output["analysis_before"] = before.to_payload()
        output["analysis_after"] = after.to_payload()
        output["deltas"] = compare(before, after)
    if include_advice:
        output["advice"] = advise(after)
    return output


class VibeRemoverColumnGenerator(ColumnGeneratorFullColumn[VibeRemoverColumnConfig]):
    """Column generator that rewrites text to tone down AI-sounding signals."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        options = self.config.rewrite_options
        logger.info(f"\U0001fa84 Rewriting column {self.config.name!r} to remove AI vibes")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   passes: {options.enabled()}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            results.append(
                humanize_row(
                    text,
                    options,
                    self.config.max_score,
                    include_analysis=self.config.include_analysis,
                    include_advice=self.config.include_advice,
                )
            )

        data = data.copy()
        data[self.config.name] = results
        return data
