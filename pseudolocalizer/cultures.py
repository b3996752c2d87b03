"""
Culture codes and output file naming.

Standards:
- ISO 639-1: 2-letter language codes (en, zh, es)
- BCP 47: language + optional script + optional region (en-US, zh-Hant-TW, es-419)
- Pseudo-locales: qps-ploc, qps-ploca, qps-plocm (Windows pseudo-locale names)

Output File Naming Convention:
The pseudo-localized file is written next to the input with the output
culture inserted before the extension. A culture already present in the
input name is replaced rather than stacked:
- Strings.resx       -> Strings.qps-ploc.resx
- Strings.en.resx    -> Strings.qps-ploc.resx
- Strings.es-MX.json -> Strings.qps-ploc.json
- en.json            -> qps-ploc.json (locale directories name files by culture only)
"""

import re
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_OUTPUT_CULTURE = "qps-ploc"

# ISO 639-1 language codes (2-letter)
# Source: https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes
ISO_639_1 = frozenset("""
    aa ab ae af ak am an ar as av ay az ba be bg bi bm bn bo br bs ca ce ch co
    cr cs cu cv cy da de dv dz ee el en eo es et eu fa ff fi fj fo fr fy ga gd
    gl gn gu gv ha he hi ho hr ht hu hy hz ia id ie ig ii ik io is it iu ja jv
    ka kg ki kj kk kl km kn ko kr ks ku kv kw ky la lb lg li ln lo lt lu lv mg
    mh mi mk ml mn mr ms mt my na nb nd ne ng nl nn no nr nv ny oc oj om or os
    pa pi pl ps pt qu rm rn ro ru rw sa sc sd se sg si sk sl sm sn so sq sr ss
    st su sv sw ta te tg th ti tk tl tn to tr ts tt tw ty ug uk ur uz ve vi vo
    wa wo xh yi yo za zh zu
""".split())

PSEUDO_LOCALES = frozenset({"qps-ploc", "qps-ploca", "qps-plocm"})

# language[-Script][-REGION]
_CULTURE_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2})"
    r"(?:-(?P<script>[A-Za-z]{4}))?"
    r"(?:-(?P<region>[A-Za-z]{2}|[0-9]{3}))?$"
)

# Anything safe to put in a file name between two dots
_OUTPUT_CULTURE_PATTERN = re.compile(r"^[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*$")


def is_culture_code(code: str) -> bool:
    """
    Check if a string names a known culture.

    Examples:
        >>> is_culture_code('en')
        True
        >>> is_culture_code('es-MX')
        True
        >>> is_culture_code('Designer')
        False
    """
    if not code:
        return False

    if code.lower() in PSEUDO_LOCALES:
        return True

    match = _CULTURE_PATTERN.match(code)
    if match is None:
        return False
    return match.group("language").lower() in ISO_639_1


def is_valid_culture(code: str) -> bool:
    """Check if a string can be used as the output culture in a file name."""
    if not isinstance(code, str) or not code:
        return False
    return _OUTPUT_CULTURE_PATTERN.match(code) is not None


def split_culture_suffix(stem: str) -> Tuple[str, Optional[str]]:
    """
    Split a trailing culture off a file stem.

    Args:
        stem: File name without its extension (e.g. 'Strings.en')

    Returns:
        Tuple of (stem without culture, culture or None)

    Examples:
        >>> split_culture_suffix('Strings.en')
        ('Strings', 'en')
        >>> split_culture_suffix('Strings.Designer')
        ('Strings.Designer', None)
        >>> split_culture_suffix('en')
        ('en', None)
    """
    base, dot, suffix = stem.rpartition('.')
    if dot and base and is_culture_code(suffix):
        return base, suffix
    return stem, None


def build_output_path(input_path: Path, culture: str = DEFAULT_OUTPUT_CULTURE) -> Path:
    """
    Get the pseudo-localized file path for an input file.

    Examples:
        >>> build_output_path(Path('/res/Bar.resx'))
        PosixPath('/res/Bar.qps-ploc.resx')
        >>> build_output_path(Path('/res/Bar.en-US.resx'), 'qps-plocm')
        PosixPath('/res/Bar.qps-plocm.resx')
        >>> build_output_path(Path('/locales/en.json'))
        PosixPath('/locales/qps-ploc.json')
    """
    input_path = Path(input_path)
    if is_culture_code(input_path.stem):
        return input_path.with_name(f"{culture}{input_path.suffix}")

    base, _ = split_culture_suffix(input_path.stem)
    return input_path.with_name(f"{base}.{culture}{input_path.suffix}")
