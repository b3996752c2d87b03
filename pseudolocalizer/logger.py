import logging
import os
from pathlib import Path

APP_DIR_ENV = "PSEUDOLOCALIZER_HOME"


def default_app_dir() -> Path:
    """User-level directory for config and logs ($PSEUDOLOCALIZER_HOME or ~/.pseudolocalizer)."""
    override = os.environ.get(APP_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".pseudolocalizer"


APP_DIR = default_app_dir()
LOG_DIR = APP_DIR / "logs"
LOG_FILE = LOG_DIR / "app.log"

LOG_MODES = ("off", "info", "debug")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Names of loggers handed out by get_logger, so a mode change can reach them
_managed_loggers = set()

# Cache for log mode to avoid repeated config reads
_log_mode_cache = None


def _get_log_mode():
    """Get log mode from configuration."""
    global _log_mode_cache
    if _log_mode_cache is not None:
        return _log_mode_cache

    try:
        from pseudolocalizer.config import load_config
        log_mode = load_config().get('log_mode', 'off')
    except Exception:
        # Config not importable yet (first import of config itself) or unreadable
        return 'off'

    if log_mode not in LOG_MODES:
        log_mode = 'off'
    _log_mode_cache = log_mode
    return log_mode


def _level_for(log_mode: str) -> int:
    if log_mode == 'debug':
        return logging.DEBUG
    if log_mode == 'off':
        # Higher than CRITICAL disables everything
        return logging.CRITICAL + 1
    return logging.INFO


def _make_file_handler() -> logging.FileHandler:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    f_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
    f_handler.setLevel(logging.DEBUG)
    f_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return f_handler


def _apply_log_mode(logger: logging.Logger, log_mode: str) -> None:
    """Bring a logger's level and handlers in line with log_mode."""
    level = _level_for(log_mode)
    logger.setLevel(level)

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    console_handlers = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]

    if log_mode == 'off':
        for handler in file_handlers:
            handler.close()
            logger.removeHandler(handler)
    elif not file_handlers:
        logger.addHandler(_make_file_handler())

    if log_mode != 'off' and not console_handlers:
        c_handler = logging.StreamHandler()
        c_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(c_handler)
        console_handlers.append(c_handler)

    for handler in console_handlers:
        handler.setLevel(level)


def refresh_log_mode(log_mode: str = None):
    """
    Clear the log mode cache and update all existing loggers (call this when config is updated).

    Pass log_mode when it comes from a config file other than the default one.
    """
    global _log_mode_cache
    _log_mode_cache = log_mode if log_mode in LOG_MODES else None

    log_mode = _get_log_mode()
    for name in list(_managed_loggers):
        _apply_log_mode(logging.getLogger(name), log_mode)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    _managed_loggers.add(name)
    _apply_log_mode(logger, _get_log_mode())
    return logger
