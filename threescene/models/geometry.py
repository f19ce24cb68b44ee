"""Typed geometry and camera fragments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from threescene.errors import SerializationError


class GeometryFragment(BaseModel):
    """A mesh or line geometry already laid out in three.js form.

    ``data`` is passed through untouched.  ``user_data`` is the attribute
    side-table and always carries a ``layer`` entry.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    uuid: str
    type: str = "Geometry"
    data: dict[str, Any] = Field(default_factory=dict)
    user_data: dict[str, Any] = Field(default_factory=dict, alias="userData")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Vector3(BaseModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class CameraFragment(BaseModel):
    """A named view: where the camera sits and what it looks at."""

    name: str
    eye: Vector3
    target: Vector3


_FragmentT = TypeVar("_FragmentT", bound=BaseModel)


def _parse(model: type[_FragmentT], fragment: str | Mapping[str, Any] | BaseModel) -> _FragmentT:
    if isinstance(fragment, model):
        return fragment
    try:
        if isinstance(fragment, str):
            return model.model_validate_json(fragment)
        return model.model_validate(dict(fragment))
    except (PydanticValidationError, TypeError, ValueError) as exc:
        raise SerializationError(f"Malformed {model.__name__}: {exc}") from exc


def parse_geometry(fragment: str | Mapping[str, Any] | GeometryFragment) -> GeometryFragment:
    """Parse a serialized mesh or line geometry fragment."""
    return _parse(GeometryFragment, fragment)


def parse_camera(fragment: str | Mapping[str, Any] | CameraFragment) -> CameraFragment:
    """Parse a serialized camera fragment."""
    return _parse(CameraFragment, fragment)
