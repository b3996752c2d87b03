"""
Pseudo-localizer Exceptions

Kept in one module so transforms, resource walkers and the outer surfaces
can share them without circular imports.
"""


class PseudoLocalizerError(Exception):
    """Base error with optional details."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class UnknownTransformError(PseudoLocalizerError):
    """Raised when a transform identifier is not registered."""

    def __init__(self, name: str, available=None):
        available = list(available or [])
        super().__init__(
            f"Unknown transform '{name}'",
            details={'name': name, 'available': available},
        )
        self.name = name


class ResourceError(PseudoLocalizerError):
    """Problem reading or rebuilding a resource document."""


class ResourceFormatError(ResourceError):
    """The resource document could not be parsed."""


class UnsupportedResourceError(ResourceError):
    """No walker is registered for the file type."""


class FileProcessingError(PseudoLocalizerError):
    """Writing the pseudo-localized output failed."""
