"""Typed records for elements, fragments and the compiled document."""

from threescene.models.colors import Color, as_color
from threescene.models.document import SceneChild, SceneDocument
from threescene.models.element import Element, ElementKind, Layer
from threescene.models.geometry import CameraFragment, GeometryFragment, Vector3
from threescene.models.materials import (
    LineBasicMaterial,
    MaterialBase,
    MeshBasicMaterial,
    MeshFaceMaterial,
    MeshLambertMaterial,
    MeshPhongMaterial,
    parse_material,
)
from threescene.models.mesh import Mesh, MeshFace, Polyline

__all__ = [
    "CameraFragment",
    "Color",
    "Element",
    "ElementKind",
    "GeometryFragment",
    "Layer",
    "LineBasicMaterial",
    "MaterialBase",
    "Mesh",
    "MeshBasicMaterial",
    "MeshFace",
    "MeshFaceMaterial",
    "MeshLambertMaterial",
    "MeshPhongMaterial",
    "Polyline",
    "SceneChild",
    "SceneDocument",
    "Vector3",
    "as_color",
    "parse_material",
]
