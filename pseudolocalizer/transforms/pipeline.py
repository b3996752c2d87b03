"""
Transform pipeline.

A pipeline is an ordered list of transforms. Applying it folds the value
through each transform in turn; an empty pipeline returns the value
unchanged. The order is whatever the caller asked for and is never changed
(brackets then mirror gives "]olleh[", mirror then brackets gives "[olleh]").
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Sequence, Tuple

from pseudolocalizer.exceptions import UnknownTransformError
from pseudolocalizer.transforms.text import accents, brackets, extra_length, mirror, underscores

Transform = Callable[[str], str]

# Canonical order, also the order the single-letter CLI flags register in
TRANSFORMS: Dict[str, Transform] = {
    "extra_length": extra_length,
    "accents": accents,
    "brackets": brackets,
    "mirror": mirror,
    "underscores": underscores,
}

TRANSFORM_ALIASES = {
    "l": "extra_length",
    "a": "accents",
    "b": "brackets",
    "m": "mirror",
    "u": "underscores",
}

TRANSFORM_DESCRIPTIONS = {
    "extra_length": "Make all words 30% longer, to ensure that there is room for translations.",
    "accents": "Add accents on all letters so that non-localized text can be spotted.",
    "brackets": "Add brackets to show the start and end of each localized string.",
    "mirror": "Reverse all characters (\"mirror\").",
    "underscores": "Replace all characters with underscores, keeping {0}-style placeholders.",
}

DEFAULT_TRANSFORMS = ("extra_length", "accents", "brackets")


def normalize_transform_name(name: str) -> str:
    """
    Map a user-supplied identifier to its registry key.

    Accepts the registry key in any case, with hyphens instead of
    underscores, or one of the single-letter aliases.

    Raises:
        UnknownTransformError: If nothing matches
    """
    key = (name or "").strip().lower().replace("-", "_")
    key = TRANSFORM_ALIASES.get(key, key)
    if key not in TRANSFORMS:
        raise UnknownTransformError(name, available=TRANSFORMS.keys())
    return key


def resolve_transforms(names: Iterable[str]) -> Tuple[Transform, ...]:
    """Look up transform functions by identifier, keeping the given order."""
    return tuple(TRANSFORMS[normalize_transform_name(name)] for name in names)


def apply_transforms(value: str, transforms: Sequence[Transform]) -> str:
    """Feed value through each transform in order."""
    for transform_fn in transforms:
        value = transform_fn(value)
    return value


def transform(value: str, enabled_transforms: Sequence[str]) -> str:
    """
    Pseudo-localize one resource value.

    Args:
        value: The string payload of a resource entry
        enabled_transforms: Ordered transform identifiers; empty means identity

    Returns:
        The transformed value

    Raises:
        UnknownTransformError: If an identifier is not registered
    """
    return apply_transforms(value, resolve_transforms(enabled_transforms))


@dataclass(frozen=True)
class Pipeline:
    """Resolved, ordered transforms ready to be applied to many values."""
    names: Tuple[str, ...] = ()
    transforms: Tuple[Transform, ...] = ()

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "Pipeline":
        keys = tuple(normalize_transform_name(name) for name in names)
        return cls(names=keys, transforms=tuple(TRANSFORMS[key] for key in keys))

    def apply(self, value: str) -> str:
        return apply_transforms(value, self.transforms)

    def __call__(self, value: str) -> str:
        return self.apply(value)

    def __len__(self) -> int:
        return len(self.transforms)
