"""Pseudo-localization API routes."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Dict, List, Optional

from flask import Blueprint, current_app, jsonify, request, send_file

import pseudolocalizer.config as config
from pseudolocalizer.cultures import build_output_path, is_valid_culture
from pseudolocalizer.exceptions import ResourceError, UnknownTransformError
from pseudolocalizer.logger import get_logger
from pseudolocalizer.resources.files import get_processor
from pseudolocalizer.transforms.pipeline import (
    TRANSFORM_DESCRIPTIONS,
    TRANSFORMS,
    Pipeline,
)

pseudo_bp = Blueprint("pseudo", __name__)
logger = get_logger(__name__)

MIMETYPES = {
    ".resx": "application/xml",
    ".json": "application/json",
}


def _current_config() -> Dict[str, Any]:
    return config.load_config(current_app.config["CONFIG_PATH"])


def _default_transforms() -> List[str]:
    return config.configured_transforms(_current_config())


def _unknown_transform_response(e: UnknownTransformError):
    logger.warning("Rejected unknown transform: %s", e.name)
    return jsonify({"error": str(e), "details": e.details}), 400


@pseudo_bp.get("/transforms")
def list_transforms():
    """Return the available transforms and the configured default order."""
    return jsonify({
        "transforms": [
            {"id": name, "description": TRANSFORM_DESCRIPTIONS[name]}
            for name in TRANSFORMS
        ],
        "default": _default_transforms(),
    })


@pseudo_bp.post("/pseudolocalize")
def pseudolocalize_text():
    """Pseudo-localize a single string ("text") or a list of strings ("texts")."""
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    names: Optional[List[str]] = data.get("transforms")

    if names is None:
        names = _default_transforms()
    elif not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        return jsonify({"error": "'transforms' must be a list of transform names"}), 400

    try:
        pipeline = Pipeline.from_names(names)
    except UnknownTransformError as e:
        return _unknown_transform_response(e)

    if "text" in data:
        text = data["text"]
        if not isinstance(text, str):
            return jsonify({"error": "'text' must be a string"}), 400
        return jsonify({"result": pipeline(text), "transforms": list(pipeline.names)})

    if "texts" in data:
        texts = data["texts"]
        if not isinstance(texts, list) or not all(isinstance(t, str) for t in texts):
            return jsonify({"error": "'texts' must be a list of strings"}), 400
        return jsonify({"results": [pipeline(t) for t in texts], "transforms": list(pipeline.names)})

    return jsonify({"error": "Request body must contain 'text' or 'texts'"}), 400


@pseudo_bp.post("/pseudolocalize/file")
def pseudolocalize_file():
    """Pseudo-localize an uploaded .resx or .json file and send it back."""
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        return jsonify({"error": "No file uploaded"}), 400

    raw_names = request.form.get("transforms")
    if raw_names is None:
        names = _default_transforms()
    else:
        names = [n.strip() for n in raw_names.split(",") if n.strip()]

    culture = request.form.get("culture") or _current_config().get("output_culture")
    if not is_valid_culture(culture):
        return jsonify({"error": f"Invalid output culture: {culture}"}), 400

    filename = Path(upload.filename).name
    try:
        pipeline = Pipeline.from_names(names)
        processor = get_processor(Path(filename), pipeline)
        output = io.BytesIO()
        count = processor.process(upload.stream, output)
    except UnknownTransformError as e:
        return _unknown_transform_response(e)
    except ResourceError as e:
        logger.warning("Rejected upload %s: %s", filename, e)
        return jsonify({"error": str(e)}), 400

    output_name = build_output_path(Path(filename), culture).name
    logger.info(f"Pseudo-localized upload {filename} -> {output_name} ({count} values)")

    output.seek(0)
    return send_file(
        output,
        mimetype=MIMETYPES.get(Path(filename).suffix.lower(), "application/octet-stream"),
        as_attachment=True,
        download_name=output_name,
    )
