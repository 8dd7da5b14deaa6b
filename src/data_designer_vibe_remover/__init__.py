# SPDX-License-Identifier: Apache-2.0
"""AI vibe remover plugin for NeMo Data Designer.

Adds a ``vibe-remover`` column type that scores text for AI-sounding signals
(emojis, em dashes, cliches, buzzwords, sentence length, repetition) and
rewrites it with deterministic regex passes. No LLM calls in the core.

Usage::

    from data_designer_vibe_remover import VibeRemoverColumnConfig

    builder.add_column(VibeRemoverColumnConfig(
        name="humanized",
        target_columns=["article"],
        max_score=40,
    ))
"""

from data_designer_vibe_remover.analysis import AnalysisResult, analyze_text
from data_designer_vibe_remover.config import VibeRemoverColumnConfig
from data_designer_vibe_remover.core import Hyperparameters
from data_designer_vibe_remover.rewrite import RewriteOptions, rewrite_text

__all__ = [
    "VibeRemoverColumnConfig",
    "analyze_text",
    "rewrite_text",
    "AnalysisResult",
    "RewriteOptions",
    "Hyperparameters",
]
