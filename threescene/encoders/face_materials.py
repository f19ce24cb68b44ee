"""Per-face material encoder.

Turns a mesh plus a list of colors (one per face) into a ``MeshFaceMaterial``
palette and a flat array of palette indexes.  When there are fewer colors
than faces the last color is reused for the remaining faces.  three.js
splits each quad into two triangles, so a quad contributes two indexes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from threescene.config import FACE_INDEX_ATTRIBUTE
from threescene.errors import SceneValidationError
from threescene.models.colors import ColorLike, as_color
from threescene.models.materials import MeshBasicMaterial, MeshFaceMaterial
from threescene.models.mesh import Mesh

logger = logging.getLogger(__name__)


@dataclass
class FaceMaterialResult:
    """Output of :func:`encode_face_materials`."""

    material: MeshFaceMaterial
    face_indexes: list[int] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def palette_size(self) -> int:
        return len(self.material.materials)


def format_face_indexes(indexes: Sequence[int]) -> str:
    """Render indexes as the comma-terminated string the viewer parses."""
    return "".join(f"{i}," for i in indexes)


def encode_face_materials(
    mesh: Mesh,
    colors: Sequence[ColorLike],
    attributes: dict[str, Any] | None = None,
) -> FaceMaterialResult:
    """Build a face-material palette for *mesh* from *colors*.

    Parameters
    ----------
    mesh:
        Mesh whose faces drive the iteration.
    colors:
        One color per face.  Extra colors are ignored; missing ones repeat
        the last color.
    attributes:
        Attribute side-table to extend with the index string.  Not mutated.

    Raises
    ------
    SceneValidationError
        If *colors* is empty.
    """
    if not colors:
        raise SceneValidationError("At least one color is required to color mesh faces.")

    last = len(colors) - 1
    palette: dict[str, int] = {}
    indexes: list[int] = []

    for cursor, face in enumerate(mesh.faces):
        key = as_color(colors[min(cursor, last)]).to_hex()
        if key not in palette:
            palette[key] = len(palette)
        slot = palette[key]
        indexes.append(slot)
        if face.is_quad:
            indexes.append(slot)

    material = MeshFaceMaterial(
        materials=[MeshBasicMaterial(color=key) for key in palette],
    )

    merged = dict(attributes or {})
    merged[FACE_INDEX_ATTRIBUTE] = format_face_indexes(indexes)

    logger.debug(
        "Encoded %d faces into %d palette slots", len(mesh.faces), len(palette),
    )
    return FaceMaterialResult(material=material, face_indexes=indexes, attributes=merged)
