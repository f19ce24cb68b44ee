"""Output path validation for compiled scene files."""

from __future__ import annotations

import re
from pathlib import Path

from threescene.config import JSON_EXTENSIONS
from threescene.errors import PathError

# Characters no filename may hold on any platform the viewer's users run
_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_SEPARATORS = re.compile(r"[\\/]")


def _suffix(filename: str) -> str:
    dot = filename.rfind(".")
    return filename[dot:] if dot > 0 else ""


def normalize_output_path(file_path: str) -> str:
    """Append ``.json`` to a path whose filename has no extension."""
    if file_path[-5:] == ".json":
        return file_path
    filename = _SEPARATORS.split(file_path)[-1]
    if _suffix(filename):
        return file_path
    return file_path + ".json"


def validate_output_path(file_path: str | None) -> Path:
    """Check *file_path* as a scene output target and return it normalized.

    Raises
    ------
    PathError
        If the path holds more than one colon or any semicolon, the
        filename holds characters invalid in filenames, neither the file
        nor its directory exists, or the extension is not ``.js``/``.json``.
    """
    if not file_path or not file_path.strip():
        raise PathError("Your file name is invalid - check your input and try again.")

    file_path = normalize_output_path(file_path)

    if file_path.count(":") > 1 or ";" in file_path:
        raise PathError("Your file name is invalid - check your input and try again.")

    filename = _SEPARATORS.split(file_path)[-1]
    if _INVALID_FILENAME_CHARS.sub("", filename) != filename:
        raise PathError("Your file name is invalid - check your input and try again.")

    target = Path(file_path)
    parent_exists = target.parent.is_dir()
    if not target.is_file() and not parent_exists:
        raise PathError(
            "The directory you specified does not exist. Please double check your input."
        )

    if parent_exists and _suffix(filename).lower() not in JSON_EXTENSIONS:
        raise PathError(
            "Please provide a file of type .js or .json.  Something like: 'myExampleFile.json'."
        )

    return target
