"""
Positional placeholder recognition.

A placeholder is an opening brace, one or more decimal digits and a closing
brace: {0}, {12}. Anything else that merely looks like one ({0 without the
closing brace, {}, {name}) is ordinary text.

Every placeholder-aware transform scans with match_placeholder: try to match
at the current position, copy the token verbatim and jump past it on success,
otherwise handle one character and advance by one.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

# Compiled once, read-only
PLACEHOLDER_PATTERN = re.compile(r"\{[0-9]+\}")


@dataclass(frozen=True)
class PlaceholderToken:
    """A placeholder span inside a string."""
    start: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.start + self.length


def match_placeholder(text: str, pos: int) -> Optional[PlaceholderToken]:
    """Return the placeholder starting exactly at pos, or None."""
    if pos >= len(text) or text[pos] != '{':
        return None

    match = PLACEHOLDER_PATTERN.match(text, pos)
    if match is None:
        return None
    return PlaceholderToken(start=pos, length=match.end() - pos, text=match.group(0))


def iter_placeholders(text: str) -> Iterator[PlaceholderToken]:
    """
    Yield placeholder tokens left to right.

    Scanning resumes right after a matched token's closing brace, so tokens
    never overlap and adjacent tokens ({0}{1}) are found independently.
    """
    pos = 0
    while pos < len(text):
        token = match_placeholder(text, pos)
        if token is None:
            pos += 1
            continue
        yield token
        pos = token.end


def split_placeholders(text: str) -> Iterator[Tuple[str, bool]]:
    """
    Split text into (segment, is_placeholder) pieces.

    Joining the segments gives back the original text. Empty plain segments
    are not emitted.

    Example:
        >>> list(split_placeholders("Hi {0}!"))
        [('Hi ', False), ('{0}', True), ('!', False)]
    """
    pos = 0
    for token in iter_placeholders(text):
        if token.start > pos:
            yield text[pos:token.start], False
        yield token.text, True
        pos = token.end

    if pos < len(text):
        yield text[pos:], False


def has_placeholders(text: str) -> bool:
    return next(iter_placeholders(text), None) is not None
