"""Compiled scene document — the three.js "Object" JSON tree."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from threescene.config import DEFAULT_GENERATOR, FORMAT_TYPE, FORMAT_VERSION, IDENTITY_MATRIX
from threescene.errors import SerializationError
from threescene.models.geometry import GeometryFragment, Vector3
from threescene.models.materials import MaterialFragment, new_uuid


def _identity() -> list[int]:
    return list(IDENTITY_MATRIX)


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Metadata(_Node):
    version: float = FORMAT_VERSION
    type: str = FORMAT_TYPE
    generator: str = DEFAULT_GENERATOR


class SceneChild(_Node):
    """A Mesh or Line node referencing one geometry and one material."""

    uuid: str = Field(default_factory=new_uuid)
    name: str
    type: str
    geometry: str
    material: str
    matrix: list[int] = Field(default_factory=_identity)
    user_data: dict[str, Any] = Field(default_factory=dict, alias="userData")


class ViewEntry(_Node):
    name: str
    eye: Vector3
    target: Vector3


class LayerEntry(_Node):
    name: str


class SceneUserData(_Node):
    views: list[ViewEntry] = Field(default_factory=list)
    layers: list[LayerEntry] = Field(default_factory=list)


class SceneObject(_Node):
    uuid: str = Field(default_factory=new_uuid)
    type: str = "Scene"
    matrix: list[int] = Field(default_factory=_identity)
    children: list[SceneChild] = Field(default_factory=list)
    user_data: SceneUserData = Field(default_factory=SceneUserData, alias="userData")


class SceneDocument(_Node):
    """Root of the output file.

    Construction fails if a child references a geometry or material that is
    not listed, or if two listed materials are equivalent.
    """

    metadata: Metadata = Field(default_factory=Metadata)
    geometries: list[GeometryFragment] = Field(default_factory=list)
    materials: list[MaterialFragment] = Field(default_factory=list)
    scene: SceneObject = Field(default_factory=SceneObject, alias="object")

    @model_validator(mode="after")
    def check_references(self) -> SceneDocument:
        geometry_ids = {g.uuid for g in self.geometries}
        material_ids = {m.uuid for m in self.materials}
        for child in self.scene.children:
            if child.geometry not in geometry_ids:
                raise ValueError(f"Child {child.name!r} references unknown geometry {child.geometry}")
            if child.material not in material_ids:
                raise ValueError(f"Child {child.name!r} references unknown material {child.material}")
        for i, material in enumerate(self.materials):
            for other in self.materials[i + 1:]:
                if material.is_equivalent(other):
                    raise ValueError(f"Materials {material.uuid} and {other.uuid} are duplicates")
        return self

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = None) -> str:
        """Render the document; non-finite numbers raise SerializationError."""
        # python mode leaves NaN/inf as floats; json mode would turn them into null
        data = self.model_dump(by_alias=True, exclude_none=True)
        try:
            return json.dumps(data, indent=indent, allow_nan=False)
        except ValueError as exc:
            raise SerializationError(f"Scene holds a value JSON cannot encode: {exc}") from exc
