from data_designer_vibe_remover.config import VibeRemoverColumnConfig
from data_designer_vibe_remover.generator import humanize_row
from data_designer_vibe_remover.lexicon import SAMPLE_TEXT
from data_designer_vibe_remover.rewrite import RewriteOptions


class TestHumanizeRow:
    def test_scores_before_and_after(self):
        result = humanize_row(SAMPLE_TEXT, RewriteOptions.recommended(), max_score=40)
        assert result["score_after"] < result["score_before"]
        assert result["is_valid"] == (result["score_after"] <= 40)
        assert "—" not in result["text"]
        assert isinstance(result["advice"], list)
        assert "analysis_before" not in result

    def test_includes_analysis_payloads(self):
        result = humanize_row(
            "one — two", RewriteOptions(limit_em_dashes=True), max_score=100,
            include_analysis=True, include_advice=False,
        )
        assert result["text"] == "one, two"
        assert result["analysis_before"]["em_dash_count"] == 1
        assert result["analysis_after"]["em_dash_count"] == 0
        assert result["deltas"]["em_dash_count"] == -1
        assert "advice" not in result

    def test_blank_row(self):
        result = humanize_row("", RewriteOptions.recommended(), max_score=0)
        assert result == {"text": "", "is_valid": True, "score_before": 0, "score_after": 0, "advice": []}


class TestVibeRemoverColumnConfig:
    def test_defaults_match_recommended_passes(self):
        config = VibeRemoverColumnConfig(name="humanized", target_columns=["article"])
        assert config.rewrite_options == RewriteOptions.recommended()
        assert config.required_columns == ["article"]
        assert config.column_type == "vibe-remover"

    def test_flags_flow_into_options(self):
        config = VibeRemoverColumnConfig(
            name="humanized", target_columns=["a", "b"], jitter_syntax=True, reduce_emojis=False,
        )
        options = config.rewrite_options
        assert options.jitter_syntax
        assert not options.reduce_emojis
