"""
Transforms module - Pseudo-localization engine

This module provides:
- placeholders: positional placeholder recognition ({0}, {12})
- text: the five string transforms
- pipeline: ordered composition and the transform registry
"""

from pseudolocalizer.transforms.placeholders import (
    PLACEHOLDER_PATTERN,
    PlaceholderToken,
    match_placeholder,
    iter_placeholders,
    split_placeholders,
    has_placeholders,
)
from pseudolocalizer.transforms.text import (
    extra_length,
    accents,
    brackets,
    mirror,
    underscores,
)
from pseudolocalizer.transforms.pipeline import (
    TRANSFORMS,
    DEFAULT_TRANSFORMS,
    TRANSFORM_DESCRIPTIONS,
    Pipeline,
    normalize_transform_name,
    resolve_transforms,
    apply_transforms,
    transform,
)
