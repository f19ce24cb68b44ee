"""Scene compilation pipeline: partition -> deduplicate -> build.

Each stage is a pure function returning an immutable record, so a
compilation owns all of its state and discards it on return.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import ValidationError as PydanticValidationError

from threescene.config import ExportSettings
from threescene.errors import SerializationError
from threescene.models.document import (
    LayerEntry,
    Metadata,
    SceneChild,
    SceneDocument,
    SceneObject,
    SceneUserData,
    ViewEntry,
)
from threescene.models.element import Element, ElementKind
from threescene.models.geometry import GeometryFragment, parse_camera, parse_geometry
from threescene.models.materials import MESH_MATERIAL_TYPES, MaterialBase, new_uuid, parse_material

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartitionedElements:
    """Elements split by kind, each bucket in input order."""

    meshes: tuple[Element, ...] = ()
    lines: tuple[Element, ...] = ()
    cameras: tuple[Element, ...] = ()
    layer_groups: dict[str, tuple[Element, ...]] = field(default_factory=dict)
    """Mesh and line elements grouped by layer name, in first-seen order."""


@dataclass(frozen=True)
class ResolvedGeometry:
    """A geometry paired with the identifier of its kept material."""

    kind: ElementKind
    geometry: GeometryFragment
    material_id: str
    layer_name: str


@dataclass(frozen=True)
class DeduplicatedScene:
    geometries: tuple[ResolvedGeometry, ...] = ()
    materials: tuple[MaterialBase, ...] = ()


def partition_elements(elements: Iterable[Element | None]) -> PartitionedElements:
    """Split *elements* into mesh, line and camera buckets."""
    meshes: list[Element] = []
    lines: list[Element] = []
    cameras: list[Element] = []
    groups: dict[str, list[Element]] = {}

    for element in elements:
        if element is None:
            continue
        if element.kind is ElementKind.CAMERA:
            cameras.append(element)
            continue
        if element.kind is ElementKind.MESH:
            meshes.append(element)
        else:
            lines.append(element)
        groups.setdefault(element.layer_name, []).append(element)

    return PartitionedElements(
        meshes=tuple(meshes),
        lines=tuple(lines),
        cameras=tuple(cameras),
        layer_groups={name: tuple(members) for name, members in groups.items()},
    )


def _find_equivalent(material: MaterialBase, kept: list[MaterialBase]) -> MaterialBase | None:
    for existing in kept:
        if existing.type == material.type and existing.is_equivalent(material):
            return existing
    return None


def _check_material_kind(kind: ElementKind, material: MaterialBase) -> None:
    if kind is ElementKind.MESH and material.type not in MESH_MATERIAL_TYPES:
        raise SerializationError(f"Mesh elements cannot use a {material.type}")
    if kind is ElementKind.LINE and material.type != "LineBasicMaterial":
        raise SerializationError(f"Line elements cannot use a {material.type}")


def deduplicate_materials(partition: PartitionedElements) -> DeduplicatedScene:
    """Parse fragments and collapse equivalent materials across the scene.

    Meshes are processed before lines and both share one collection of
    kept materials, so a material is kept the first time it is seen.

    Raises
    ------
    SerializationError
        If a fragment is malformed, a material does not suit its element
        kind, or two geometries share a uuid.
    """
    kept: list[MaterialBase] = []
    kept_ids: set[str] = set()
    geometry_ids: set[str] = set()
    resolved: list[ResolvedGeometry] = []

    for element in (*partition.meshes, *partition.lines):
        geometry = parse_geometry(element.geometry)
        if geometry.uuid in geometry_ids:
            raise SerializationError(f"Duplicate geometry uuid {geometry.uuid}")
        geometry_ids.add(geometry.uuid)

        material = parse_material(element.material)
        _check_material_kind(element.kind, material)

        match = _find_equivalent(material, kept)
        if match is not None:
            logger.debug("Material %s reuses %s (%s)", material.uuid, match.uuid, material.type)
            material_id = match.uuid
        else:
            if material.uuid in kept_ids:
                material = material.with_uuid(new_uuid())
            kept.append(material)
            kept_ids.add(material.uuid)
            material_id = material.uuid

        resolved.append(ResolvedGeometry(
            kind=element.kind,
            geometry=geometry,
            material_id=material_id,
            layer_name=element.layer_name,
        ))

    return DeduplicatedScene(geometries=tuple(resolved), materials=tuple(kept))


def build_children(scene: DeduplicatedScene) -> list[SceneChild]:
    """One child per geometry, meshes first, each with the identity matrix."""
    children: list[SceneChild] = []
    for i, item in enumerate(scene.geometries):
        if item.kind is ElementKind.MESH:
            user_data = dict(item.geometry.user_data)
            user_data.setdefault("layer", item.layer_name)
            name, node_type = f"mesh{i}", "Mesh"
        else:
            user_data = {"layer": item.layer_name}
            name, node_type = f"line {i}", "Line"
        children.append(SceneChild(
            name=name,
            type=node_type,
            geometry=item.geometry.uuid,
            material=item.material_id,
            user_data=user_data,
        ))
    return children


def build_views(cameras: Iterable[Element]) -> list[ViewEntry]:
    """Turn camera elements into named views, first name wins."""
    views: dict[str, ViewEntry] = {}
    for element in cameras:
        camera = parse_camera(element.geometry)
        if camera.name in views:
            logger.warning("Duplicate view name %r ignored", camera.name)
            continue
        views[camera.name] = ViewEntry(name=camera.name, eye=camera.eye, target=camera.target)
    return list(views.values())


def compile_scene(
    elements: Iterable[Element | None],
    settings: ExportSettings | None = None,
) -> SceneDocument:
    """Compile *elements* into a scene document.

    Raises
    ------
    SerializationError
        If any fragment is malformed or the assembled document fails its
        reference checks.
    """
    settings = settings or ExportSettings()

    partition = partition_elements(elements)
    deduplicated = deduplicate_materials(partition)
    children = build_children(deduplicated)
    views = build_views(partition.cameras)

    try:
        document = SceneDocument(
            metadata=Metadata(generator=settings.generator),
            geometries=[item.geometry for item in deduplicated.geometries],
            materials=list(deduplicated.materials),
            scene=SceneObject(
                children=children,
                user_data=SceneUserData(
                    views=views,
                    layers=[LayerEntry(name=name) for name in partition.layer_groups],
                ),
            ),
        )
    except PydanticValidationError as exc:
        raise SerializationError(f"Compiled scene is inconsistent: {exc}") from exc

    logger.debug(
        "Compiled %d geometries, %d materials, %d views",
        len(document.geometries), len(document.materials), len(views),
    )
    return document
