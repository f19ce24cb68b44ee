"""Geometry fragment encoders for meshes, polylines and camera views."""

from __future__ import annotations

from typing import Any

from threescene.config import DEFAULT_LAYER
from threescene.models.geometry import CameraFragment, GeometryFragment, Vector3
from threescene.models.materials import new_uuid
from threescene.models.mesh import Mesh, Point3, Polyline

# three.js JSON geometry (format 3) face type bits
_FACE_TRIANGLE = 0
_FACE_QUAD = 1


def mesh_geometry(mesh: Mesh, attributes: dict[str, Any] | None = None) -> GeometryFragment:
    """Encode *mesh* as a Geometry fragment carrying *attributes* as userData."""
    vertices: list[float] = []
    for x, y, z in mesh.vertices:
        vertices.extend((x, y, z))

    faces: list[int] = []
    for face in mesh.faces:
        faces.append(_FACE_TRIANGLE if face.is_triangle else _FACE_QUAD)
        faces.extend(face.vertices)

    user_data = dict(attributes or {})
    user_data.setdefault("layer", DEFAULT_LAYER)

    return GeometryFragment(
        uuid=new_uuid(),
        data={
            "vertices": vertices,
            "normals": [],
            "uvs": [],
            "faces": faces,
            "scale": 1.0,
        },
        user_data=user_data,
    )


def line_geometry(polyline: Polyline, layer: str | None = None) -> GeometryFragment:
    """Encode *polyline* as a Geometry fragment of consecutive vertices."""
    vertices: list[float] = []
    for x, y, z in polyline.points:
        vertices.extend((x, y, z))

    return GeometryFragment(
        uuid=new_uuid(),
        data={"vertices": vertices},
        user_data={"layer": layer or DEFAULT_LAYER},
    )


def camera_fragment(name: str, eye: Point3, target: Point3) -> CameraFragment:
    """Build a named view fragment."""
    return CameraFragment(
        name=name,
        eye=Vector3(x=eye[0], y=eye[1], z=eye[2]),
        target=Vector3(x=target[0], y=target[1], z=target[2]),
    )

