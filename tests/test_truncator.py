"""Unit tests for the word-safe truncator."""

from __future__ import annotations

import pytest

from engine.truncator import truncate

FOX = "The quick brown fox jumps over the lazy dog"

SAMPLES = [
    FOX,
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt.",
    "First clause; second clause; third clause goes on for a while here",
    "Is this a question? Yes it is, and the answer keeps on going for a long time",
    "Supercalifragilisticexpialidocious words are hard to cut cleanly",
    "Café crème brûlée à la carte pour deux personnes s'il vous plaît",
    "  padded text with leading spaces that is long enough to be cut  ",
    "Fish &amp; chips are a classic British dish served with mushy peas",
]


class TestShortText:
    def test_fits_returns_trimmed(self):
        assert truncate("  Hello world  ", 20) == "Hello world"

    def test_exact_length_unchanged(self):
        assert truncate("abcde", 5) == "abcde"

    def test_empty(self):
        assert truncate("", 10) == ""

    def test_no_punctuation_added_when_fits(self):
        assert truncate("No stop here", 100) == "No stop here"


class TestCutting:
    def test_fox_at_word_boundary(self):
        result = truncate(FOX, 20)
        assert result == "The quick brown fox..."
        assert len(result) <= 23

    def test_partial_word_removed(self):
        # Cut lands inside "jumps".
        assert truncate(FOX, 22) == "The quick brown fox..."

    def test_cut_right_after_word(self):
        assert truncate(FOX, 25) == "The quick brown fox jumps..."

    def test_last_word_split_is_dropped(self):
        assert truncate("hello world", 8) == "hello..."

    def test_trailing_comma_removed(self):
        assert truncate("Apples, pears, plums and more fruit", 14) == "Apples, pears..."

    def test_semicolon_becomes_period(self):
        assert truncate("First clause; second clause follows", 13) == "First clause."

    def test_existing_stop_kept(self):
        assert truncate("Done. Then more text follows here", 5) == "Done."

    def test_question_mark_kept(self):
        assert truncate("Why? Because reasons", 4) == "Why?"

    def test_multibyte_counted_as_characters(self):
        result = truncate("żółw ćma źrebię łoś", 9)
        assert result == "żółw ćma..."

    def test_entities_decoded_in_cut(self):
        result = truncate("Fish &amp; chips and other things", 16)
        assert result == "Fish & chips..."

    def test_single_long_word(self):
        assert truncate("abcdefghijklmnop", 5) == "..."


class TestProperties:
    @pytest.mark.parametrize("text", SAMPLES)
    @pytest.mark.parametrize("max_chars", [5, 10, 20, 33, 50])
    def test_length_bound(self, text, max_chars):
        assert len(truncate(text, max_chars)) <= max_chars + 3

    @pytest.mark.parametrize("text", SAMPLES)
    @pytest.mark.parametrize("max_chars", [10, 20, 33])
    def test_terminal_punctuation(self, text, max_chars):
        result = truncate(text, max_chars)
        assert result.endswith((".", "?", "!"))

    @pytest.mark.parametrize("text", SAMPLES)
    @pytest.mark.parametrize("max_chars", [5, 10, 20, 33, 50])
    def test_idempotent(self, text, max_chars):
        once = truncate(text, max_chars)
        assert truncate(once, max_chars) == once

    @pytest.mark.parametrize("text", SAMPLES[:6])
    @pytest.mark.parametrize("max_chars", [10, 20, 33, 50])
    def test_never_splits_a_word(self, text, max_chars):
        result = truncate(text, max_chars).rstrip(".?!;")
        if not result:
            return
        last = result.split(" ")[-1]
        assert last in [word.strip(",.;?!") for word in text.split(" ")]
