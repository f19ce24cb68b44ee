"""Global configuration: format constants and export settings."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# three.js "Object" scene format written by the compiler
FORMAT_VERSION = 4.3
FORMAT_TYPE = "Object"
DEFAULT_GENERATOR = "Spectacles_Grasshopper_Exporter"

# Layer assigned to elements that carry none
DEFAULT_LAYER = "Default"

# Attribute key holding the per-face palette indexes, read by the viewer
FACE_INDEX_ATTRIBUTE = "Spectacles_FaceColorIndexes"

# THREE.DoubleSide
DEFAULT_SIDE = 2

IDENTITY_MATRIX: tuple[int, ...] = (
    1, 0, 0, 0,
    0, 1, 0, 0,
    0, 0, 1, 0,
    0, 0, 0, 1,
)

# Material defaults
DEFAULT_SHININESS = 30.0
DEFAULT_OPACITY = 1.0
DEFAULT_LINEWIDTH = 1.0

# Extensions accepted for an output file
JSON_EXTENSIONS = (".js", ".json")

# Settings sources
CONFIG_DIR = ".threescene"
CONFIG_FILE = "config.json"
ENV_PREFIX = "THREESCENE_"


class ExportSettings(BaseModel):
    """Tunable settings for scene serialization."""

    generator: str = DEFAULT_GENERATOR
    """Value written to ``metadata.generator``."""

    indent: int | None = None
    """JSON indentation; ``None`` writes compact output."""

    log_level: str = "INFO"


def load_settings(project_path: str | Path | None = None) -> ExportSettings:
    """Load merged settings: defaults -> config.json -> env vars.

    Parameters
    ----------
    project_path:
        Optional project root containing ``.threescene/config.json``.
    """
    values: dict[str, Any] = {}

    if project_path is not None:
        config_json = Path(project_path) / CONFIG_DIR / CONFIG_FILE
        if config_json.is_file():
            try:
                data = json.loads(config_json.read_text(encoding="utf-8"))
                values.update({k: v for k, v in data.items() if k in ExportSettings.model_fields})
            except (json.JSONDecodeError, OSError):
                logger.debug("Could not read %s", config_json, exc_info=True)

    for key in ExportSettings.model_fields:
        env_val = os.environ.get(ENV_PREFIX + key.upper())
        if env_val is not None:
            values[key] = env_val

    return ExportSettings(**values)


def configure_logging(settings: ExportSettings | None = None) -> None:
    """Apply ``settings.log_level`` to the ``threescene`` logger."""
    settings = settings or ExportSettings()
    logging.getLogger("threescene").setLevel(settings.log_level.upper())
