"""Web application package for the pseudo-localizer."""

from pathlib import Path
from typing import Optional

from flask import Flask

from pseudolocalizer.config import ensure_config


def create_app(config_path: Optional[Path] = None) -> Flask:
    """Application factory for the web interface."""
    config_file = ensure_config(config_path)

    from .app import build_app  # Import here to avoid circular imports

    return build_app(config_file)


__all__ = ["create_app"]
