import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pseudolocalizer.cultures import DEFAULT_OUTPUT_CULTURE, is_valid_culture
from pseudolocalizer.exceptions import UnknownTransformError
from pseudolocalizer.logger import APP_DIR, LOG_MODES, get_logger
from pseudolocalizer.transforms.pipeline import DEFAULT_TRANSFORMS, normalize_transform_name

logger = get_logger(__name__)

CONFIG_DIR = APP_DIR / "config"
CONFIG_FILE = CONFIG_DIR / "config.json"

# Default configuration template
DEFAULT_CONFIG = {
    "transforms": ["extra_length", "accents", "brackets"],  # Applied in this order
    "output_culture": DEFAULT_OUTPUT_CULTURE,
    "log_mode": "off"
}


def _resolve_path(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else CONFIG_FILE


def _defaults() -> Dict[str, Any]:
    config = DEFAULT_CONFIG.copy()
    config["transforms"] = list(DEFAULT_CONFIG["transforms"])
    return config


def create_default_config(path: Optional[Path] = None) -> Path:
    """Create the default config.json file."""
    config_file = _resolve_path(path)
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, 'w', encoding='utf-8') as f:
        json.dump(DEFAULT_CONFIG, f, indent=4, ensure_ascii=False)
    logger.info(f"Created default config file: {config_file}")
    return config_file


def ensure_config(path: Optional[Path] = None) -> Path:
    """Create the config file with defaults on first run."""
    config_file = _resolve_path(path)
    if not config_file.exists():
        create_default_config(config_file)
    return config_file


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the configuration, merged over the defaults.

    A missing file gives the defaults. A corrupt or unreadable file is logged
    and also gives the defaults.
    """
    config_file = _resolve_path(path)
    config = _defaults()

    if not config_file.exists():
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse config file {config_file}: {e}")
        logger.warning("Using default configuration")
        return config
    except OSError as e:
        logger.error(f"Failed to read config file {config_file}: {e}")
        logger.warning("Using default configuration")
        return config

    if not isinstance(stored, dict):
        logger.warning(f"Config file {config_file} does not contain an object, using defaults")
        return config

    config.update(stored)
    logger.debug(f"Configuration loaded from {config_file}")
    return config


def save_config(config: Dict[str, Any], path: Optional[Path] = None):
    """Save the configuration to the config file."""
    config_file = _resolve_path(path)
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4, ensure_ascii=False)
        logger.info(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save config to {config_file}: {e}")
        raise


def configured_transforms(config: Dict[str, Any]) -> List[str]:
    """
    Transforms to run when the caller names none.

    A missing or null "transforms" falls back to the built-in defaults; an
    empty list is kept and means the values pass through unchanged.
    """
    names = config.get("transforms")
    return list(DEFAULT_TRANSFORMS) if names is None else list(names)


def validate_config(config: Dict[str, Any]) -> Optional[str]:
    """
    Check a configuration dict.

    Returns:
        Error message, or None if the config is usable
    """
    if not isinstance(config, dict):
        return "Configuration must be an object"

    if "transforms" in config:
        transforms = config["transforms"]
        if not isinstance(transforms, list) or not all(isinstance(t, str) for t in transforms):
            return "'transforms' must be a list of transform names"
        for name in transforms:
            try:
                normalize_transform_name(name)
            except UnknownTransformError as e:
                return str(e)

    if "log_mode" in config and config["log_mode"] not in LOG_MODES:
        return f"'log_mode' must be one of: {', '.join(LOG_MODES)}"

    if "output_culture" in config:
        culture = config["output_culture"]
        if not isinstance(culture, str) or not is_valid_culture(culture):
            return f"Invalid output culture: {culture!r}"

    return None
