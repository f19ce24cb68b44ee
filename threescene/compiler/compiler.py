"""SceneCompiler — main entry point for writing a scene file.

Usage::

    from threescene import SceneCompiler

    result = SceneCompiler().write(True, "out/scene.json", elements)
    if not result.success:
        print(result.message)
"""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from threescene.compiler.paths import validate_output_path
from threescene.compiler.pipeline import compile_scene
from threescene.config import ExportSettings
from threescene.errors import PathError, SceneWriteError
from threescene.models.document import SceneDocument
from threescene.models.element import Element

logger = logging.getLogger(__name__)

WRITE_PROMPT = "Set the 'write' input to true to write the JSON file to disk."


@dataclass
class CompileResult:
    """Outcome of a :meth:`SceneCompiler.write` call."""

    file_path: Path | None
    success: bool = True
    message: str = ""
    level: str = "remark"
    """'remark', 'warning' or 'error'."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": str(self.file_path) if self.file_path else None,
            "success": self.success,
            "message": self.message,
            "level": self.level,
        }


def _write_text(target: Path, text: str) -> None:
    """Replace *target* with *text* without leaving a partial file behind."""
    try:
        fd, tmp = tempfile.mkstemp(dir=target.parent, prefix=".scene_", suffix=".json")
    except OSError as exc:
        raise SceneWriteError(f"Could not write {target}: {exc}") from exc
    try:
        with open(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        Path(tmp).replace(target)
    except OSError as exc:
        Path(tmp).unlink(missing_ok=True)
        raise SceneWriteError(f"Could not write {target}: {exc}") from exc


class SceneCompiler:
    """Compile elements into a three.js scene document.

    Parameters
    ----------
    settings:
        Export settings; defaults to :class:`ExportSettings` defaults.
    """

    def __init__(self, settings: ExportSettings | None = None) -> None:
        self.settings = settings or ExportSettings()

    def compile(self, elements: Iterable[Element | None]) -> SceneDocument:
        """Build the document tree without touching the filesystem."""
        return compile_scene(elements, self.settings)

    def to_json(self, elements: Iterable[Element | None]) -> str:
        return self.compile(elements).to_json(indent=self.settings.indent)

    def write(
        self,
        write: bool,
        file_path: str | Path | None,
        elements: Iterable[Element | None],
    ) -> CompileResult:
        """Validate *file_path*, compile *elements* and write the file.

        Never raises for user errors: path problems, malformed fragments
        and write failures come back as an unsuccessful result.  Nothing
        is written unless the whole document serializes first.
        """
        if not write:
            return CompileResult(file_path=None, success=False, message=WRITE_PROMPT, level="warning")

        try:
            target = validate_output_path(None if file_path is None else str(file_path))
        except PathError as exc:
            logger.error("Rejected output path %r: %s", file_path, exc)
            return CompileResult(file_path=None, success=False, message=str(exc), level="error")

        try:
            text = self.to_json(elements)
            _write_text(target, text)
        except Exception as exc:
            logger.error("Scene export to %s failed: %s", target, exc)
            return CompileResult(
                file_path=None,
                success=False,
                message=(
                    "Something went wrong while trying to write the file to disk. "
                    f"Here's the error:\n\n{exc}"
                ),
                level="error",
            )

        logger.info("Wrote scene to %s", target)
        return CompileResult(file_path=target, message="JSON file written successfully!")
