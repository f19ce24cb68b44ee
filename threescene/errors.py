"""Exceptions raised while encoding and compiling scenes."""

from __future__ import annotations


class SceneExportError(Exception):
    """Base class for all threescene errors."""


class SceneValidationError(SceneExportError):
    """Raised when caller-supplied input values are invalid."""


class PathError(SceneExportError):
    """Raised when an output path fails validation."""


class SceneWriteError(SceneExportError):
    """Raised when the compiled document cannot be written to disk."""


class SerializationError(SceneExportError):
    """Raised when a geometry or material fragment is malformed."""
