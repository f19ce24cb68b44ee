"""Attribute side-table built from parallel name/value lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from threescene.config import DEFAULT_LAYER
from threescene.errors import SceneValidationError


def build_attributes(
    names: Sequence[str] | None = None,
    values: Sequence[Any] | None = None,
    layer: str | None = None,
) -> dict[str, Any]:
    """Pair up attribute *names* and *values* and add the ``layer`` entry.

    Raises
    ------
    SceneValidationError
        If the lists differ in length or a name repeats.
    """
    names = list(names or [])
    values = list(values or [])
    if len(names) != len(values):
        raise SceneValidationError(
            f"Please provide equal numbers of attribute names and values "
            f"({len(names)} names, {len(values)} values)."
        )

    attributes: dict[str, Any] = {}
    for name, value in zip(names, values):
        if name in attributes:
            raise SceneValidationError(f"Attribute name {name!r} is given more than once.")
        attributes[name] = value

    attributes["layer"] = layer or DEFAULT_LAYER
    return attributes
