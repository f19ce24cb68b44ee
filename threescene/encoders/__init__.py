"""Encoders that turn host geometry and colors into scene fragments."""

from threescene.encoders.attributes import build_attributes
from threescene.encoders.elements import (
    camera_element,
    encode_colored_mesh,
    line_element,
    mesh_element,
)
from threescene.encoders.face_materials import FaceMaterialResult, encode_face_materials
from threescene.encoders.geometry import camera_fragment, line_geometry, mesh_geometry
from threescene.encoders.materials import (
    encode_basic_material,
    encode_lambert_material,
    encode_line_material,
    encode_phong_material,
)

__all__ = [
    "FaceMaterialResult",
    "build_attributes",
    "camera_element",
    "camera_fragment",
    "encode_basic_material",
    "encode_colored_mesh",
    "encode_face_materials",
    "encode_lambert_material",
    "encode_line_material",
    "encode_phong_material",
    "line_element",
    "line_geometry",
    "mesh_element",
    "mesh_geometry",
]
