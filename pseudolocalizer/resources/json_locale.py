"""
JSON locale resource walker.

Handles i18n locale files such as en.json: nested objects (and arrays) whose
string leaves are the UI texts. Keys, numbers, booleans, null and blank
strings are left alone.
"""

import json
from typing import Any, BinaryIO, Callable, List, Tuple

from pseudolocalizer.exceptions import ResourceFormatError
from pseudolocalizer.logger import get_logger

logger = get_logger(__name__)


def is_translatable(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def transform_json(obj: Any, transform: Callable[[str], str]) -> Any:
    """
    Return a copy of obj with every translatable string leaf transformed.

    Example:
        >>> transform_json({"home": {"title": "Hi", "count": 3}}, str.upper)
        {'home': {'title': 'HI', 'count': 3}}
    """
    if isinstance(obj, dict):
        return {key: transform_json(value, transform) for key, value in obj.items()}
    if isinstance(obj, list):
        return [transform_json(item, transform) for item in obj]
    if is_translatable(obj):
        return transform(obj)
    return obj


def flatten_json(obj: Any, path: str = "", pairs: List[Tuple[str, Any]] = None) -> List[Tuple[str, Any]]:
    """
    Flatten nested JSON into key-value pairs.

    Args:
        obj: JSON object to flatten
        path: Current key path
        pairs: Accumulator list (created if None)

    Returns:
        List of (key_path, value) tuples; list items use their index as key

    Example:
        >>> flatten_json({"home": {"title": "Hello", "tabs": ["A", "B"]}})
        [('home.title', 'Hello'), ('home.tabs.0', 'A'), ('home.tabs.1', 'B')]
    """
    if pairs is None:
        pairs = []

    if isinstance(obj, dict):
        items = obj.items()
    elif isinstance(obj, list):
        items = ((str(index), item) for index, item in enumerate(obj))
    else:
        if path:
            pairs.append((path, obj))
        return pairs

    for key, value in items:
        new_path = f"{path}.{key}" if path else key
        flatten_json(value, new_path, pairs)

    return pairs


class JsonProcessor:
    """Applies a string transform to every string leaf of a JSON locale file."""

    def __init__(self, transform: Callable[[str], str]):
        self.transform = transform

    def process(self, input_stream: BinaryIO, output_stream: BinaryIO) -> int:
        """
        Transform a JSON locale document.

        Returns:
            Number of values rewritten

        Raises:
            ResourceFormatError: If the input is not valid JSON
        """
        try:
            data = json.load(input_stream)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ResourceFormatError(f"Invalid JSON document: {e}") from e

        count = sum(1 for _, value in flatten_json(data) if is_translatable(value))
        if is_translatable(data):
            # A bare string document has no key path
            count = 1

        result = transform_json(data, self.transform)
        logger.debug(f"Transformed {count} JSON values")

        output_stream.write(json.dumps(result, ensure_ascii=False, indent=2).encode("utf-8"))
        output_stream.write(b"\n")
        return count
