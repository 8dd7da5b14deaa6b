import pytest

from data_designer_vibe_remover.analysis import analyze_text
from data_designer_vibe_remover.core import split_sentences, word_count
from data_designer_vibe_remover.lexicon import SAMPLE_TEXT
from data_designer_vibe_remover.rewrite import (
    RewriteOptions,
    cleanup,
    jitter_syntax,
    limit_em_dashes,
    replace_buzzwords,
    rewrite_text,
    simplify_transitions,
    strip_emojis,
    use_contractions,
    vary_sentence_length,
)

THIRTY_WORDS = " ".join(f"w{i}" for i in range(30))


class TestRewriteOptions:
    def test_defaults_are_off(self):
        assert RewriteOptions().enabled() == []

    def test_recommended_leaves_jitter_off(self):
        enabled = RewriteOptions.recommended().enabled()
        assert "jitter_syntax" not in enabled
        assert len(enabled) == 6

    def test_all_enabled(self):
        assert len(RewriteOptions.all_enabled().enabled()) == 7


class TestRewriteText:
    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank_input_returns_empty_string(self, text):
        assert rewrite_text(text, RewriteOptions.all_enabled()) == ""

    def test_no_flags_only_cleans_up(self):
        text = "Hello   world ,  how are you ??"
        assert rewrite_text(text, RewriteOptions()) == "Hello world, how are you?"
        assert rewrite_text(text, RewriteOptions()) == cleanup(text)

    def test_no_flags_leaves_signals_in_place(self):
        assert rewrite_text(SAMPLE_TEXT, RewriteOptions()) == cleanup(SAMPLE_TEXT)

    def test_strips_emojis(self):
        text = "Launch day \U0001f680\U0001f389 is here \U0001f60a!"
        out = rewrite_text(text, RewriteOptions(reduce_emojis=True))
        assert out == "Launch day is here!"
        assert analyze_text(out).emoji_count == 0

    def test_buzzwords_and_em_dashes_example(self):
        text = "I will leverage a tapestry of insights — furthermore — to explore the landscape."
        out = rewrite_text(text, RewriteOptions(replace_buzzwords=True, limit_em_dashes=True))
        assert out == "I will use a mix of insights, also, to explore the landscape."
        assert "—" not in out

    def test_em_dash_rewrite_is_idempotent(self):
        options = RewriteOptions(limit_em_dashes=True)
        once = rewrite_text("We shipped — finally — on time.", options)
        assert once == "We shipped, finally, on time."
        assert rewrite_text(once, options) == once

    def test_long_sentence_splits_in_two(self):
        out = rewrite_text(THIRTY_WORDS, RewriteOptions(vary_sentence_length=True))
        sentences = split_sentences(out)
        assert len(sentences) == 2
        assert sentences[0].endswith(".")
        assert word_count(sentences[0]) == 15
        assert word_count(sentences[1]) == 15

    def test_pass_order_buzzwords_before_jitter(self):
        options = RewriteOptions(replace_buzzwords=True, jitter_syntax=True)
        assert rewrite_text("Furthermore, it works.", options) == "plus, it works."

    def test_pass_order_buzzwords_before_transitions(self):
        assert rewrite_text("Moreover, we ship.", RewriteOptions(simplify_transitions=True)) == "we ship."
        options = RewriteOptions(replace_buzzwords=True, simplify_transitions=True)
        assert rewrite_text("Moreover, we ship.", options) == "also, we ship."

    def test_recommended_rewrite_lowers_sample_score(self):
        before = analyze_text(SAMPLE_TEXT)
        after = analyze_text(rewrite_text(SAMPLE_TEXT, RewriteOptions.recommended()))
        assert after.score < before.score
        assert after.emoji_count == 0
        assert after.em_dash_count == 0
        assert after.cliche_count == 0
        assert after.buzzword_count == 0

    def test_output_has_no_stray_whitespace(self):
        out = rewrite_text("  Hi  there \U0001f60a .  ", RewriteOptions.all_enabled())
        assert out == out.strip()
        assert "  " not in out


class TestStripEmojis:
    def test_removes_pictographs(self):
        assert strip_emojis("Ship it \U0001f680 now") == "Ship it  now"

    @pytest.mark.parametrize(
        "text, expected",
        [("Press 1\ufe0f\u20e3 now", "Press 1 now"), ("Call #\ufe0f\u20e3", "Call #")],
    )
    def test_keycaps_keep_their_base_character(self, text, expected):
        assert strip_emojis(text) == expected
        assert analyze_text(strip_emojis(text)).emoji_count == 0


class TestEmDashes:
    def test_replaces_with_comma(self):
        assert limit_em_dashes("a—b") == "a, b"

    def test_collapses_double_commas(self):
        assert limit_em_dashes("a,— b") == "a, b"

    def test_idempotent(self):
        once = limit_em_dashes("x,,— y — z")
        assert limit_em_dashes(once) == once
        assert "—" not in once


class TestReplaceBuzzwords:
    def test_whole_words_only(self):
        assert replace_buzzwords("She delved into the delve.") == "She delved into the explore."
        assert replace_buzzwords("Robustness is robust.") == "Robustness is reliable."

    def test_case_insensitive(self):
        assert replace_buzzwords("LEVERAGE it") == "use it"

    def test_cliche_phrases(self):
        assert replace_buzzwords("In conclusion, at the end of the day we win.") == "overall, ultimately we win."

    def test_buzzwords_run_before_cliches(self):
        assert replace_buzzwords("We unlock synergies.") == "We unlock benefits."


class TestContractions:
    def test_contracts_phrases(self):
        text = "I am sure we are ready, but you do not know it is not done and it will not wait."
        expected = "I'm sure we're ready, but you don't know it isn't done and it won't wait."
        assert use_contractions(text) == expected

    def test_lower_case_i_am(self):
        assert use_contractions("i am here") == "I'm here"

    def test_can_not(self):
        assert use_contractions("We can not stop.") == "We cannot stop."

    def test_whole_words_only(self):
        assert use_contractions("This island is nothing") == "This island is nothing"


class TestSimplifyTransitions:
    def test_removes_formal_transitions(self):
        text = "However, it works. Therefore we ship. Thus it ends."
        assert simplify_transitions(text) == "but it works. we ship. it ends."

    def test_however_without_trailing_comma(self):
        assert simplify_transitions("It works however") == "It works but "

    def test_leaves_longer_words_alone(self):
        assert simplify_transitions("Thusly spoken.") == "Thusly spoken."

    def test_long_s_matches_case_insensitively(self):
        assert simplify_transitions("thu\u017f we win") == "we win"
        assert rewrite_text("thu\u017f we win", RewriteOptions(simplify_transitions=True)) == "we win"


class TestVarySentenceLength:
    def test_merges_short_sentence_into_previous(self):
        text = "This is a fairly normal sentence here. Short one. Another normal sentence that is long enough."
        expected = "This is a fairly normal sentence here, short one. Another normal sentence that is long enough."
        assert vary_sentence_length(text) == expected

    def test_first_short_sentence_is_kept(self):
        assert vary_sentence_length("Hi. This is fine.") == "Hi, this is fine."

    def test_splits_long_sentence_keeping_terminal_punctuation(self):
        out = vary_sentence_length(THIRTY_WORDS + ".")
        first, second = split_sentences(out)
        assert first.endswith("w14.")
        assert second.endswith("w29.")

    def test_middle_length_sentence_unchanged(self):
        text = "This sentence has exactly seven words total."
        assert vary_sentence_length(text) == text

    @pytest.mark.parametrize(
        "text",
        [SAMPLE_TEXT, "A. B. C. D.", THIRTY_WORDS, "One! Two? Three.  Four five six seven eight nine."],
    )
    def test_never_produces_empty_sentences(self, text):
        for sentence in split_sentences(vary_sentence_length(text)):
            assert word_count(sentence) > 0


class TestJitterSyntax:
    def test_replaces_connectives(self):
        assert jitter_syntax("I also went, then left, so what.") == "I plus went, after that left, as a result what."

    def test_case_insensitive_whole_words(self):
        assert jitter_syntax("Also soap") == "plus soap"

    def test_long_s_matches_case_insensitively(self):
        assert jitter_syntax("\u017fo it goes") == "as a result it goes"
        assert rewrite_text("\u017fo it goes", RewriteOptions(jitter_syntax=True)) == "as a result it goes"


class TestCleanup:
    def test_removes_space_before_punctuation(self):
        assert cleanup("Hi , there ; ok !") == "Hi, there; ok!"

    def test_collapses_repeated_terminal_marks(self):
        assert cleanup("Wow !! Really ?? Yes...") == "Wow! Really? Yes."

    def test_keeps_mixed_terminal_marks(self):
        assert cleanup("What?!") == "What?!"

    def test_collapses_whitespace_and_trims(self):
        assert cleanup("  a   b \n\n c  ") == "a b c"
