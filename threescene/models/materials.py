"""Typed material records and their equivalence rules.

Every record carries a ``uuid`` and a ``type`` discriminator.  Two records
are equivalent when their types match and every field listed in
``equivalence_fields`` compares equal; the ``uuid`` never takes part.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from threescene.config import DEFAULT_LINEWIDTH, DEFAULT_OPACITY, DEFAULT_SHININESS, DEFAULT_SIDE
from threescene.errors import SerializationError


def new_uuid() -> str:
    return str(uuid.uuid4())


class MaterialBase(BaseModel):
    """Fields shared by all material records."""

    model_config = ConfigDict(extra="allow")

    uuid: str = Field(default_factory=new_uuid)
    type: str

    equivalence_fields: ClassVar[tuple[str, ...]] = ()

    def equivalence_key(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.equivalence_fields)

    def is_equivalent(self, other: MaterialBase) -> bool:
        """Return True if *other* is the same material under another uuid."""
        if self.type != other.type:
            return False
        return self.equivalence_key() == other.equivalence_key()

    def with_uuid(self, material_id: str) -> MaterialBase:
        return self.model_copy(update={"uuid": material_id})

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class MeshBasicMaterial(MaterialBase):
    """Unlit flat-colored material."""

    type: Literal["MeshBasicMaterial"] = "MeshBasicMaterial"
    color: str
    side: int = DEFAULT_SIDE
    opacity: float = DEFAULT_OPACITY
    transparent: bool = False

    equivalence_fields: ClassVar[tuple[str, ...]] = ("color", "transparent", "side", "opacity")


class MeshLambertMaterial(MaterialBase):
    """Matte (non-shiny) material."""

    type: Literal["MeshLambertMaterial"] = "MeshLambertMaterial"
    color: str
    ambient: str = "0x000000"
    emissive: str = "0x000000"
    side: int = DEFAULT_SIDE
    opacity: float = DEFAULT_OPACITY
    transparent: bool = False
    shading: int | None = None

    equivalence_fields: ClassVar[tuple[str, ...]] = (
        "color", "ambient", "emissive", "side", "opacity", "shading",
    )


class MeshPhongMaterial(MaterialBase):
    """Shiny material with a specular highlight."""

    type: Literal["MeshPhongMaterial"] = "MeshPhongMaterial"
    color: str
    ambient: str = "0x000000"
    emissive: str = "0x000000"
    specular: str = "0xA9A9A9"
    shininess: float = DEFAULT_SHININESS
    opacity: float = DEFAULT_OPACITY
    transparent: bool = False
    wireframe: bool = False
    side: int = DEFAULT_SIDE

    equivalence_fields: ClassVar[tuple[str, ...]] = (
        "color", "ambient", "emissive", "side", "opacity",
        "shininess", "specular", "transparent", "wireframe",
    )


class LineBasicMaterial(MaterialBase):
    """Material for polylines."""

    type: Literal["LineBasicMaterial"] = "LineBasicMaterial"
    color: str
    linewidth: float = DEFAULT_LINEWIDTH
    opacity: float = DEFAULT_OPACITY

    equivalence_fields: ClassVar[tuple[str, ...]] = ("color", "linewidth", "opacity")


class MeshFaceMaterial(MaterialBase):
    """A palette of basic materials indexed per mesh face."""

    type: Literal["MeshFaceMaterial"] = "MeshFaceMaterial"
    materials: list[MeshBasicMaterial] = Field(default_factory=list)

    def equivalence_key(self) -> tuple[Any, ...]:
        return tuple(m.equivalence_key() for m in self.materials)


MaterialFragment = Annotated[
    Union[
        MeshFaceMaterial,
        MeshPhongMaterial,
        MeshLambertMaterial,
        MeshBasicMaterial,
        LineBasicMaterial,
    ],
    Field(discriminator="type"),
]

MESH_MATERIAL_TYPES = frozenset({
    "MeshFaceMaterial",
    "MeshPhongMaterial",
    "MeshLambertMaterial",
    "MeshBasicMaterial",
})

_MATERIAL_ADAPTER: TypeAdapter[MaterialFragment] = TypeAdapter(MaterialFragment)


def parse_material(fragment: str | Mapping[str, Any] | MaterialBase) -> MaterialBase:
    """Parse a serialized material fragment into its typed record.

    Raises
    ------
    SerializationError
        If the fragment is not valid JSON, has an unknown ``type`` or is
        missing required fields.
    """
    if isinstance(fragment, MaterialBase):
        return fragment
    try:
        if isinstance(fragment, str):
            return _MATERIAL_ADAPTER.validate_json(fragment)
        return _MATERIAL_ADAPTER.validate_python(dict(fragment))
    except (PydanticValidationError, json.JSONDecodeError, TypeError, ValueError) as exc:
        raise SerializationError(f"Malformed material fragment: {exc}") from exc
