"""
Pseudo-localizer - generate pseudo-localized resource files.

This package provides:
- transforms: the placeholder-aware transform engine and pipeline
- resources: ResX and JSON locale walkers plus file processing
- cli: the pseudolocalize command
- web: Flask interface and JSON API
"""

from pseudolocalizer.transforms import Pipeline, transform

__version__ = "1.0.0"

__all__ = ["Pipeline", "transform", "__version__"]
