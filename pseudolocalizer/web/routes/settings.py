"""Settings management API routes."""

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, current_app, jsonify, request

import pseudolocalizer.config as config
from pseudolocalizer.logger import LOG_FILE, get_logger, refresh_log_mode

settings_bp = Blueprint("settings", __name__)
logger = get_logger(__name__)

SETTINGS_KEYS = ("transforms", "output_culture", "log_mode")


@settings_bp.get("/")
def get_settings():
    """Return current configuration with default values merged."""
    try:
        current_config = config.load_config(current_app.config["CONFIG_PATH"])
        logger.debug("Settings retrieved with defaults merged")
        return jsonify({"config": current_config, "defaults": config.DEFAULT_CONFIG})
    except Exception as e:
        logger.error(f"Failed to retrieve settings: {e}")
        return jsonify({"error": "Failed to retrieve settings"}), 500


@settings_bp.put("/")
def update_settings():
    """Update configuration."""
    data = request.get_json(silent=True)
    if not data or "config" not in data:
        return jsonify({"error": "Request body must contain 'config'"}), 400

    new_config = data["config"]

    validation_error = config.validate_config(new_config)
    if validation_error:
        return jsonify({"error": validation_error}), 400

    config_path = current_app.config["CONFIG_PATH"]
    current_config = config.load_config(config_path)

    # Only known keys are stored; everything else in the request is ignored
    for key in SETTINGS_KEYS:
        if key in new_config:
            current_config[key] = new_config[key]

    try:
        config.save_config(current_config, config_path)
    except OSError:
        return jsonify({"error": "Failed to update settings"}), 500

    # Clear log mode cache so a new log mode takes effect
    refresh_log_mode(current_config.get("log_mode"))

    logger.info("Settings updated successfully")
    return jsonify({"message": "Settings updated successfully", "config": current_config})


@settings_bp.delete("/logs")
def clear_logs():
    """Delete log files to free up disk space."""
    log_dir = Path(LOG_FILE).parent
    deleted_count = 0
    try:
        if log_dir.exists():
            for log_path in log_dir.glob("*.log"):
                log_path.unlink()
                deleted_count += 1
    except OSError as e:
        logger.error(f"Failed to delete logs: {e}")
        return jsonify({"error": "Failed to delete logs"}), 500

    if deleted_count > 0:
        return jsonify({"message": f"Successfully deleted {deleted_count} log file(s)"})
    return jsonify({"message": "No log files found to delete"})
