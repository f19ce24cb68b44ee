"""threescene — compile CAD scene fragments into three.js Object JSON."""

__version__ = "1.0.0"

from threescene.compiler import CompileResult, SceneCompiler, compile_scene, validate_output_path
from threescene.config import ExportSettings, load_settings
from threescene.encoders import (
    camera_element,
    encode_basic_material,
    encode_colored_mesh,
    encode_face_materials,
    encode_lambert_material,
    encode_line_material,
    encode_phong_material,
    line_element,
    mesh_element,
)
from threescene.errors import (
    PathError,
    SceneExportError,
    SceneValidationError,
    SceneWriteError,
    SerializationError,
)
from threescene.models import Color, Element, ElementKind, Layer, Mesh, Polyline, SceneDocument

__all__ = [
    "__version__",
    # Compiler
    "CompileResult",
    "SceneCompiler",
    "compile_scene",
    "validate_output_path",
    # Encoders
    "camera_element",
    "encode_basic_material",
    "encode_colored_mesh",
    "encode_face_materials",
    "encode_lambert_material",
    "encode_line_material",
    "encode_phong_material",
    "line_element",
    "mesh_element",
    # Models
    "Color",
    "Element",
    "ElementKind",
    "Layer",
    "Mesh",
    "Polyline",
    "SceneDocument",
    # Config
    "ExportSettings",
    "load_settings",
    # Errors
    "PathError",
    "SceneExportError",
    "SceneValidationError",
    "SceneWriteError",
    "SerializationError",
]
