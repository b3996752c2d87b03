"""Route blueprints for the web application."""

from .pseudo import pseudo_bp
from .settings import settings_bp

__all__ = [
    "pseudo_bp",
    "settings_bp",
]
