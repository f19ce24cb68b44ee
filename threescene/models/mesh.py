"""Input mesh and polyline geometry handed over by the host CAD tool."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

Point3 = tuple[float, float, float]


class MeshFace(BaseModel):
    """A triangle or quad, as vertex indices."""

    vertices: tuple[int, ...]

    @field_validator("vertices")
    @classmethod
    def check_face_size(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if len(value) not in (3, 4):
            raise ValueError(f"Faces must have 3 or 4 vertices, got {len(value)}")
        return value

    @property
    def is_triangle(self) -> bool:
        return len(self.vertices) == 3

    @property
    def is_quad(self) -> bool:
        return len(self.vertices) == 4


class Mesh(BaseModel):
    """A mesh with vertex positions and tri/quad faces."""

    vertices: list[Point3] = Field(default_factory=list)
    faces: list[MeshFace] = Field(default_factory=list)

    @field_validator("faces", mode="before")
    @classmethod
    def wrap_faces(cls, value: list) -> list:
        return [
            f if isinstance(f, (MeshFace, dict)) else {"vertices": tuple(f)}
            for f in value
        ]

    @property
    def triangle_count(self) -> int:
        return sum(1 for f in self.faces if f.is_triangle)

    @property
    def quad_count(self) -> int:
        return sum(1 for f in self.faces if f.is_quad)


class Polyline(BaseModel):
    """An ordered list of points."""

    points: list[Point3] = Field(default_factory=list)
