"""
Pseudo-localization string transforms.

Each transform is a plain function str -> str with no failure mode:
- extra_length: make every word about 30% longer
- accents: swap ASCII letters for accented look-alikes
- brackets: wrap the whole value in [ ]
- mirror: reverse the value
- underscores: blank out every character

All of them except mirror leave positional placeholders ({0}, {12}) intact.
"""

import math

from pseudolocalizer.transforms.placeholders import match_placeholder, split_placeholders

EXTRA_LENGTH_PERCENT = 30

ACCENTED_LETTERS = {
    'A': 'Å', 'B': 'Ɓ', 'C': 'Ç', 'D': 'Đ', 'E': 'É', 'F': 'Ƒ', 'G': 'Ĝ',
    'H': 'Ĥ', 'I': 'Î', 'J': 'Ĵ', 'K': 'Ķ', 'L': 'Ļ', 'M': 'Ṁ', 'N': 'Ñ',
    'O': 'Ö', 'P': 'Þ', 'Q': 'Ǫ', 'R': 'Ŕ', 'S': 'Š', 'T': 'Ţ', 'U': 'Û',
    'V': 'Ṽ', 'W': 'Ŵ', 'X': 'Ẋ', 'Y': 'Ý', 'Z': 'Ž',
    'a': 'å', 'b': 'ƀ', 'c': 'ç', 'd': 'ð', 'e': 'é', 'f': 'ƒ', 'g': 'ĝ',
    'h': 'ĥ', 'i': 'î', 'j': 'ĵ', 'k': 'ķ', 'l': 'ļ', 'm': 'ṁ', 'n': 'ñ',
    'o': 'ö', 'p': 'þ', 'q': 'ǫ', 'r': 'ŕ', 's': 'š', 't': 'ţ', 'u': 'û',
    'v': 'ṽ', 'w': 'ŵ', 'x': 'ẋ', 'y': 'ý', 'z': 'ž',
}

_ACCENT_TABLE = str.maketrans(ACCENTED_LETTERS)


def _lengthen_word(word: str) -> str:
    """Insert ~30% extra characters into a single space-free word."""
    pieces = list(split_placeholders(word))
    plain_chars = [
        char
        for segment, is_placeholder in pieces if not is_placeholder
        for char in segment if not char.isspace()
    ]
    if not plain_chars:
        return word

    extra = math.ceil(len(plain_chars) * EXTRA_LENGTH_PERCENT / 100)
    source = [char for char in plain_chars if char.isalnum()] or plain_chars
    padding = ''.join(source[i % len(source)] for i in range(extra))

    # Pad after the last letter/digit so trailing punctuation stays trailing
    insert_at = None
    fallback = None
    offset = 0
    for segment, is_placeholder in pieces:
        if not is_placeholder:
            for i, char in enumerate(segment):
                if char.isalnum():
                    insert_at = offset + i + 1
                elif not char.isspace():
                    fallback = offset + i + 1
        offset += len(segment)

    if insert_at is None:
        insert_at = fallback

    return word[:insert_at] + padding + word[insert_at:]


def extra_length(value: str) -> str:
    """
    Make each word roughly 30% longer.

    Words are the space-separated segments of value; no whitespace is ever
    added or removed, so the word count is unchanged.

    Example:
        >>> extra_length("hello world")
        'hellohe worldwo'
    """
    return ' '.join(_lengthen_word(word) for word in value.split(' '))


def accents(value: str) -> str:
    """Replace ASCII letters with accented variants, keeping placeholders."""
    return ''.join(
        segment if is_placeholder else segment.translate(_ACCENT_TABLE)
        for segment, is_placeholder in split_placeholders(value)
    )


def brackets(value: str) -> str:
    """Wrap value in square brackets so cut-off text is easy to spot."""
    return f"[{value}]"


def mirror(value: str) -> str:
    """Reverse the whole string. Placeholders are reversed too."""
    return value[::-1]


def underscores(value: str) -> str:
    """
    Replace every character with an underscore, except placeholders.

    Example:
        >>> underscores("hello, {1} world")
        '_______{1}______'
    """
    output = []
    pos = 0
    while pos < len(value):
        token = match_placeholder(value, pos)
        if token is not None:
            output.append(token.text)
            pos = token.end
            continue
        output.append('_')
        pos += 1

    return ''.join(output)
