"""Element — one scene object waiting to be compiled.

Elements are produced by the encoders and consumed once by the scene
compiler.  Their fragments stay opaque (JSON text or plain mappings) until
the compiler parses them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, model_validator

from threescene.config import DEFAULT_LAYER

Fragment = Union[str, dict[str, Any]]


class ElementKind(str, Enum):
    MESH = "mesh"
    LINE = "line"
    CAMERA = "camera"


class Layer(BaseModel):
    """A user-facing grouping label."""

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_LAYER


class Element(BaseModel):
    """A geometry fragment paired with its material fragment and layer."""

    model_config = ConfigDict(frozen=True)

    kind: ElementKind
    geometry: Fragment
    material: Fragment | None = None
    layer: Layer | None = None

    @model_validator(mode="after")
    def check_material_matches_kind(self) -> Element:
        if self.kind is ElementKind.CAMERA and self.material is not None:
            raise ValueError("Camera elements do not carry a material")
        if self.kind is not ElementKind.CAMERA and self.material is None:
            raise ValueError(f"{self.kind.value} elements require a material")
        return self

    @property
    def layer_name(self) -> str:
        return self.layer.name if self.layer is not None else DEFAULT_LAYER
