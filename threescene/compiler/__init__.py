"""Scene compiler — deduplicates materials and assembles the scene document."""

from threescene.compiler.compiler import CompileResult, SceneCompiler
from threescene.compiler.paths import normalize_output_path, validate_output_path
from threescene.compiler.pipeline import compile_scene

__all__ = [
    "CompileResult",
    "SceneCompiler",
    "compile_scene",
    "normalize_output_path",
    "validate_output_path",
]
