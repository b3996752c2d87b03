"""Tests for the five pseudo-localization transforms."""

import pytest

from pseudolocalizer.transforms.placeholders import iter_placeholders
from pseudolocalizer.transforms.text import (
    ACCENTED_LETTERS,
    accents,
    brackets,
    extra_length,
    mirror,
    underscores,
)

SAMPLES = [
    "",
    "hello",
    "The quick brown fox bla bla bla.",
    "hello, world!",
    "You have {0} new messages in {1}",
    "  leading and  double  spaces ",
    "line one\nline two",
    "{0}",
    "{0}{1} {2}",
    "Price: {0",
    "…¡Ünïcödé!",
]


class TestExtraLength:
    def test_empty_string(self):
        assert extra_length("") == ""

    def test_single_word_gets_longer(self):
        assert extra_length("hello") == "hellohe"

    def test_sentence(self):
        assert extra_length("The quick brown fox bla bla bla.") == "TheT quickqu brownbr foxf blab blab blabl."

    def test_padding_goes_before_trailing_punctuation(self):
        assert extra_length("Save?") == "SaveSa?"

    def test_placeholders_left_alone(self):
        assert extra_length("{0} files") == "{0} filesfi"
        assert extra_length("count:{0}") == "countco:{0}"

    def test_placeholder_only_word_unchanged(self):
        assert extra_length("{0}") == "{0}"

    def test_punctuation_only_word(self):
        assert extra_length("...") == "...."

    def test_about_thirty_percent(self):
        assert len(extra_length("abcdefghij")) == 13

    @pytest.mark.parametrize("value", [s for s in SAMPLES if s])
    def test_never_shorter(self, value):
        assert len(extra_length(value)) >= len(value)

    @pytest.mark.parametrize("value", SAMPLES)
    def test_word_counts_unchanged(self, value):
        result = extra_length(value)
        assert len(result.split(" ")) == len(value.split(" "))
        assert len(result.split()) == len(value.split())

    @pytest.mark.parametrize("value", SAMPLES)
    def test_placeholders_preserved(self, value):
        assert [t.text for t in iter_placeholders(extra_length(value))] == [
            t.text for t in iter_placeholders(value)
        ]


class TestAccents:
    def test_empty_string(self):
        assert accents("") == ""

    def test_case_preserving(self):
        assert accents("Hello World") == "Ĥéļļö Ŵöŕļð"

    def test_digits_punctuation_and_placeholders_untouched(self):
        assert accents("Page {0} of 10, done!") == "Þåĝé {0} öƒ 10, ðöñé!"

    def test_non_ascii_untouched(self):
        assert accents("日本 ñ") == "日本 ñ"

    def test_table_covers_every_ascii_letter(self):
        letters = "abcdefghijklmnopqrstuvwxyz"
        assert set(ACCENTED_LETTERS) == set(letters + letters.upper())
        transformed = accents(letters + letters.upper())
        assert not any(c in letters + letters.upper() for c in transformed)
        assert len(transformed) == 52

    @pytest.mark.parametrize("value", SAMPLES)
    def test_length_unchanged(self, value):
        assert len(accents(value)) == len(value)


class TestBrackets:
    def test_empty_string(self):
        assert brackets("") == "[]"

    def test_wraps_value(self):
        assert brackets("hello") == "[hello]"
        assert brackets("The quick brown fox bla bla bla.") == "[The quick brown fox bla bla bla.]"

    @pytest.mark.parametrize("value", SAMPLES)
    def test_prefix_and_suffix(self, value):
        assert brackets(value) == "[" + value + "]"


class TestMirror:
    def test_empty_string(self):
        assert mirror("") == ""

    def test_reverses(self):
        assert mirror("hello, world!") == "!dlrow ,olleh"

    def test_not_placeholder_aware(self):
        assert mirror("{12}") == "}21{"

    @pytest.mark.parametrize("value", SAMPLES)
    def test_involution(self, value):
        assert mirror(mirror(value)) == value
        assert len(mirror(value)) == len(value)


class TestUnderscores:
    def test_empty_string(self):
        assert underscores("") == ""

    def test_plain_text(self):
        message = "hello, world!"
        assert underscores(message) == "_" * len(message)

    def test_ignores_placeholders(self):
        assert underscores("{0}hello, world") == "{0}____________"
        assert underscores("hello, {1} world") == "_______{1}______"
        assert underscores("hello, world{99}") == "____________{99}"
        assert underscores("hello, world{0") == "______________"

    def test_adjacent_placeholders(self):
        assert underscores("a{0}{1}b") == "_{0}{1}_"

    def test_malformed_placeholders_are_blanked(self):
        assert underscores("{}") == "__"
        assert underscores("{name}") == "______"
        assert underscores("{{0}}") == "_{0}_"

    @pytest.mark.parametrize("value", SAMPLES)
    def test_only_placeholders_survive(self, value):
        result = underscores(value)
        tokens = [t.text for t in iter_placeholders(value)]
        assert [t.text for t in iter_placeholders(result)] == tokens
        assert len(result) == len(value)
        leftover = result
        for token in tokens:
            leftover = leftover.replace(token, "", 1)
        assert set(leftover) <= {"_"}
