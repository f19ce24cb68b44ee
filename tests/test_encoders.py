"""Tests for the face-material, material, attribute and geometry encoders."""

from __future__ import annotations

import logging

import pytest

from threescene.config import FACE_INDEX_ATTRIBUTE
from threescene.encoders.attributes import build_attributes
from threescene.encoders.elements import camera_element, encode_colored_mesh, line_element
from threescene.encoders.face_materials import encode_face_materials, format_face_indexes
from threescene.encoders.geometry import camera_fragment, line_geometry, mesh_geometry
from threescene.encoders.materials import (
    encode_basic_material,
    encode_lambert_material,
    encode_line_material,
    encode_phong_material,
)
from threescene.errors import SceneValidationError
from threescene.models.colors import Color
from threescene.models.element import ElementKind
from threescene.models.mesh import Mesh, Polyline

RED = "#FF0000"
GREEN = "#00FF00"
BLUE = "#0000FF"


def _mesh(*faces: tuple[int, ...]) -> Mesh:
    return Mesh(
        vertices=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0), (0, 0, 1)],
        faces=list(faces),
    )


# ---------------------------------------------------------------------------
# Per-face materials
# ---------------------------------------------------------------------------


class TestFaceMaterials:
    def test_two_triangles_one_color(self):
        result = encode_face_materials(_mesh((0, 1, 2), (0, 2, 3)), [RED])
        assert result.palette_size == 1
        assert result.face_indexes == [0, 0]

    def test_quad_gets_two_slots(self):
        result = encode_face_materials(_mesh((0, 1, 2, 3), (0, 1, 4)), [RED, GREEN])
        assert result.face_indexes == [0, 0, 1]

    def test_index_count_matches_face_types(self):
        mesh = _mesh((0, 1, 2), (0, 1, 2, 3), (1, 2, 4), (0, 1, 2, 3))
        result = encode_face_materials(mesh, [RED, GREEN, BLUE])
        assert len(result.face_indexes) == mesh.triangle_count + 2 * mesh.quad_count
        assert all(0 <= i < result.palette_size for i in result.face_indexes)

    def test_short_color_list_repeats_last(self):
        mesh = _mesh((0, 1, 2), (0, 2, 3), (1, 2, 4), (0, 1, 4))
        result = encode_face_materials(mesh, [RED, GREEN])
        assert result.face_indexes == [0, 1, 1, 1]
        assert result.palette_size == 2

    def test_extra_colors_ignored(self):
        result = encode_face_materials(_mesh((0, 1, 2)), [RED, GREEN, BLUE])
        assert result.palette_size == 1
        assert result.material.materials[0].color == "0xFF0000"

    def test_repeated_colors_share_a_slot(self):
        mesh = _mesh((0, 1, 2), (0, 2, 3), (1, 2, 4))
        result = encode_face_materials(mesh, [RED, GREEN, RED])
        assert result.face_indexes == [0, 1, 0]
        colors = [m.color for m in result.material.materials]
        assert colors == ["0xFF0000", "0x00FF00"]
        assert len(set(colors)) == len(colors)

    def test_palette_entries_are_double_sided_basic(self):
        result = encode_face_materials(_mesh((0, 1, 2)), [Color(r=1, g=2, b=3)])
        entry = result.material.materials[0]
        assert entry.type == "MeshBasicMaterial"
        assert entry.side == 2
        assert result.material.type == "MeshFaceMaterial"

    def test_zero_faces(self):
        result = encode_face_materials(Mesh(), [RED])
        assert result.face_indexes == []
        assert result.palette_size == 0
        assert result.attributes[FACE_INDEX_ATTRIBUTE] == ""

    def test_empty_colors_rejected(self):
        with pytest.raises(SceneValidationError):
            encode_face_materials(_mesh((0, 1, 2)), [])

    def test_indexes_stored_in_attributes(self):
        attrs = {"layer": "Walls"}
        result = encode_face_materials(_mesh((0, 1, 2, 3), (0, 1, 4)), [RED, GREEN], attrs)
        assert result.attributes[FACE_INDEX_ATTRIBUTE] == "0,0,1,"
        assert result.attributes["layer"] == "Walls"
        assert FACE_INDEX_ATTRIBUTE not in attrs

    def test_format_face_indexes(self):
        assert format_face_indexes([3, 1, 2]) == "3,1,2,"


# ---------------------------------------------------------------------------
# Single materials
# ---------------------------------------------------------------------------


class TestPhongMaterial:
    def test_defaults(self):
        mat = encode_phong_material(RED)
        assert mat.type == "MeshPhongMaterial"
        assert mat.color == "0xFF0000"
        assert mat.ambient == "0x000000"
        assert mat.emissive == "0x000000"
        assert mat.specular == "0xA9A9A9"
        assert mat.shininess == 30.0
        assert mat.opacity == 1.0
        assert mat.transparent is False
        assert mat.wireframe is False
        assert mat.side == 2

    def test_fresh_uuid_each_call(self):
        assert encode_phong_material(RED).uuid != encode_phong_material(RED).uuid

    def test_opacity_out_of_range_resets(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING):
            mat = encode_phong_material(RED, opacity=1.5)
        assert mat.opacity == 1.0
        assert "between 0 and 1" in caplog.text

    def test_negative_opacity_resets(self):
        assert encode_phong_material(RED, opacity=-0.2).opacity == 1.0

    def test_nan_opacity_resets(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING):
            mat = encode_phong_material(RED, opacity=float("nan"))
        assert mat.opacity == 1.0
        assert mat.transparent is False
        assert "between 0 and 1" in caplog.text

    def test_explicit_opacity_marks_transparent(self):
        mat = encode_phong_material(RED, opacity=0.25)
        assert mat.opacity == 0.25
        assert mat.transparent is True

    def test_alpha_channel_sets_opacity(self):
        mat = encode_phong_material(Color(r=255, g=0, b=0, a=51))
        assert mat.opacity == pytest.approx(0.2)
        assert mat.transparent is True
        assert mat.color == "0xFF0000"

    def test_explicit_opacity_wins_over_alpha(self):
        mat = encode_phong_material("#FF000033", opacity=0.5)
        assert mat.opacity == 0.5

    def test_custom_colors(self):
        mat = encode_phong_material(RED, ambient=GREEN, emissive=BLUE, specular="#FFFFFF", shininess=80)
        assert (mat.ambient, mat.emissive, mat.specular) == ("0x00FF00", "0x0000FF", "0xFFFFFF")
        assert mat.shininess == 80.0


class TestOtherMaterials:
    def test_lambert(self):
        mat = encode_lambert_material(GREEN, opacity=0.5)
        assert mat.type == "MeshLambertMaterial"
        assert mat.color == "0x00FF00"
        assert mat.transparent is True

    def test_basic(self):
        mat = encode_basic_material(BLUE)
        assert mat.type == "MeshBasicMaterial"
        assert mat.opacity == 1.0

    def test_line(self):
        mat = encode_line_material(RED, linewidth=3)
        assert mat.type == "LineBasicMaterial"
        assert mat.linewidth == 3.0

    def test_line_width_must_be_positive(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING):
            mat = encode_line_material(RED, linewidth=0)
        assert mat.linewidth == 1.0
        assert "Line width" in caplog.text


# ---------------------------------------------------------------------------
# Attributes and geometry
# ---------------------------------------------------------------------------


class TestAttributes:
    def test_pairs_and_layer(self):
        attrs = build_attributes(["room", "level"], ["101", "1"], "Rooms")
        assert attrs == {"room": "101", "level": "1", "layer": "Rooms"}

    def test_default_layer(self):
        assert build_attributes() == {"layer": "Default"}

    def test_mismatched_counts(self):
        with pytest.raises(SceneValidationError, match="equal numbers"):
            build_attributes(["a", "b"], ["1"])

    def test_duplicate_names(self):
        with pytest.raises(SceneValidationError):
            build_attributes(["a", "a"], ["1", "2"])


class TestGeometry:
    def test_mesh_geometry_faces(self):
        geo = mesh_geometry(_mesh((0, 1, 2), (0, 1, 2, 3)), {"layer": "L"})
        assert geo.type == "Geometry"
        assert geo.data["faces"] == [0, 0, 1, 2, 1, 0, 1, 2, 3]
        assert len(geo.data["vertices"]) == 15
        assert geo.user_data == {"layer": "L"}

    def test_mesh_geometry_serializes_user_data(self):
        d = mesh_geometry(_mesh((0, 1, 2))).to_dict()
        assert d["userData"] == {"layer": "Default"}
        assert "uuid" in d

    def test_line_geometry(self):
        geo = line_geometry(Polyline(points=[(0, 0, 0), (1, 2, 3)]), "Grid")
        assert geo.data["vertices"] == [0, 0, 0, 1, 2, 3]
        assert geo.user_data == {"layer": "Grid"}

    def test_camera_fragment(self):
        cam = camera_fragment("Front", (0, -10, 2), (0, 0, 0))
        assert cam.eye.y == -10
        assert cam.target.x == 0


class TestElements:
    def test_colored_mesh_element(self):
        element = encode_colored_mesh(
            _mesh((0, 1, 2), (0, 2, 3)), [RED], ["id"], ["7"], layer="Floors",
        )
        assert element.kind is ElementKind.MESH
        assert element.layer_name == "Floors"
        assert element.material["type"] == "MeshFaceMaterial"
        assert element.geometry["userData"][FACE_INDEX_ATTRIBUTE] == "0,0,"
        assert element.geometry["userData"]["id"] == "7"

    def test_line_element_default_layer(self):
        element = line_element(Polyline(points=[(0, 0, 0), (1, 0, 0)]), encode_line_material(RED))
        assert element.kind is ElementKind.LINE
        assert element.layer_name == "Default"

    def test_camera_element_has_no_material(self):
        element = camera_element("Top", (0, 0, 10), (0, 0, 0))
        assert element.material is None
        assert element.geometry["name"] == "Top"
