"""Convenience constructors that package fragments into Elements."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from threescene.encoders.attributes import build_attributes
from threescene.encoders.face_materials import encode_face_materials
from threescene.encoders.geometry import camera_fragment, line_geometry, mesh_geometry
from threescene.models.colors import ColorLike
from threescene.models.element import Element, ElementKind, Layer
from threescene.models.materials import LineBasicMaterial, MaterialBase
from threescene.models.mesh import Mesh, Point3, Polyline


def _layer(name: str | None) -> Layer | None:
    return Layer(name=name) if name else None


def mesh_element(
    mesh: Mesh,
    material: MaterialBase,
    attribute_names: Sequence[str] | None = None,
    attribute_values: Sequence[Any] | None = None,
    layer: str | None = None,
) -> Element:
    """Pair a mesh with a single material."""
    attributes = build_attributes(attribute_names, attribute_values, layer)
    return Element(
        kind=ElementKind.MESH,
        geometry=mesh_geometry(mesh, attributes).to_dict(),
        material=material.to_dict(),
        layer=_layer(layer),
    )


def encode_colored_mesh(
    mesh: Mesh,
    colors: Sequence[ColorLike],
    attribute_names: Sequence[str] | None = None,
    attribute_values: Sequence[Any] | None = None,
    layer: str | None = None,
) -> Element:
    """Pair a mesh with a per-face color palette."""
    attributes = build_attributes(attribute_names, attribute_values, layer)
    result = encode_face_materials(mesh, colors, attributes)
    return Element(
        kind=ElementKind.MESH,
        geometry=mesh_geometry(mesh, result.attributes).to_dict(),
        material=result.material.to_dict(),
        layer=_layer(layer),
    )


def line_element(
    polyline: Polyline,
    material: LineBasicMaterial,
    layer: str | None = None,
) -> Element:
    return Element(
        kind=ElementKind.LINE,
        geometry=line_geometry(polyline, layer).to_dict(),
        material=material.to_dict(),
        layer=_layer(layer),
    )


def camera_element(name: str, eye: Point3, target: Point3) -> Element:
    return Element(
        kind=ElementKind.CAMERA,
        geometry=camera_fragment(name, eye, target).model_dump(mode="json"),
    )
