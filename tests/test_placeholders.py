"""Tests for positional placeholder recognition."""

from pseudolocalizer.transforms.placeholders import (
    PlaceholderToken,
    has_placeholders,
    iter_placeholders,
    match_placeholder,
    split_placeholders,
)


class TestMatchPlaceholder:
    def test_matches_at_position(self):
        token = match_placeholder("Hi {12}!", 3)
        assert token == PlaceholderToken(start=3, length=4, text="{12}")
        assert token.end == 7

    def test_no_match_off_brace(self):
        assert match_placeholder("Hi {12}!", 2) is None

    def test_unclosed_token_is_text(self):
        assert match_placeholder("world{0", 5) is None

    def test_empty_braces_are_text(self):
        assert match_placeholder("{}", 0) is None

    def test_named_placeholder_is_text(self):
        assert match_placeholder("{name}", 0) is None

    def test_non_digit_before_close(self):
        assert match_placeholder("{1a}", 0) is None

    def test_position_past_end(self):
        assert match_placeholder("{0}", 3) is None


class TestIterPlaceholders:
    def test_left_to_right(self):
        tokens = list(iter_placeholders("{0} of {1} files, {99} left"))
        assert [t.text for t in tokens] == ["{0}", "{1}", "{99}"]
        assert [t.start for t in tokens] == [0, 7, 18]

    def test_adjacent_tokens_found_independently(self):
        tokens = list(iter_placeholders("{0}{1}"))
        assert [(t.start, t.text) for t in tokens] == [(0, "{0}"), (3, "{1}")]

    def test_nested_braces(self):
        tokens = list(iter_placeholders("{{0}}"))
        assert [(t.start, t.text) for t in tokens] == [(1, "{0}")]

    def test_broken_token_followed_by_valid_one(self):
        tokens = list(iter_placeholders("{0{1}"))
        assert [(t.start, t.text) for t in tokens] == [(2, "{1}")]

    def test_is_lazy(self):
        tokens = iter_placeholders("{0} {1}")
        assert next(tokens).text == "{0}"

    def test_empty_string(self):
        assert list(iter_placeholders("")) == []


class TestSplitPlaceholders:
    def test_segments_rejoin_to_input(self):
        text = "Copied {0} of {1}{2} items"
        pieces = list(split_placeholders(text))
        assert "".join(segment for segment, _ in pieces) == text
        assert pieces == [
            ("Copied ", False),
            ("{0}", True),
            (" of ", False),
            ("{1}", True),
            ("{2}", True),
            (" items", False),
        ]

    def test_plain_text(self):
        assert list(split_placeholders("hello, world{0")) == [("hello, world{0", False)]

    def test_empty_string(self):
        assert list(split_placeholders("")) == []


def test_has_placeholders():
    assert has_placeholders("Total: {0}")
    assert not has_placeholders("Total: {zero}")
    assert not has_placeholders("")
