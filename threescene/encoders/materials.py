"""Single-material encoders for meshes and lines.

Each call returns a freshly identified material record.  Deduplication is
left to the scene compiler.
"""

from __future__ import annotations

import logging

from threescene.config import DEFAULT_LINEWIDTH, DEFAULT_OPACITY, DEFAULT_SHININESS
from threescene.models.colors import BLACK, DARK_GRAY, Color, ColorLike, as_color
from threescene.models.materials import (
    LineBasicMaterial,
    MeshBasicMaterial,
    MeshLambertMaterial,
    MeshPhongMaterial,
)

logger = logging.getLogger(__name__)


def _resolve_opacity(opacity: float | None, color: Color) -> tuple[float, bool]:
    """Clamp *opacity* and fold in the diffuse color's alpha.

    Returns ``(opacity, transparent)``.
    """
    if opacity is None:
        opacity = DEFAULT_OPACITY
    if not 0.0 <= opacity <= 1.0:
        logger.warning(
            "The opacity input must be between 0 and 1, got %s; defaulting back to 1.",
            opacity,
        )
        opacity = DEFAULT_OPACITY

    if opacity == DEFAULT_OPACITY and not color.is_opaque:
        return color.alpha_fraction, True
    return float(opacity), opacity < 1.0


def encode_phong_material(
    color: ColorLike,
    ambient: ColorLike | None = None,
    emissive: ColorLike | None = None,
    specular: ColorLike | None = None,
    shininess: float | None = None,
    opacity: float | None = None,
) -> MeshPhongMaterial:
    """Create a shiny mesh material.

    Parameters
    ----------
    color:
        Diffuse color.  A non-opaque alpha sets the opacity when *opacity*
        is left at its default.
    ambient, emissive:
        Default to black.
    specular:
        Highlight color, dark gray by default.
    shininess:
        Highlight sharpness, 30 by default.
    opacity:
        In [0, 1]; values outside the range are reset to 1 with a warning.
    """
    diffuse = as_color(color)
    resolved, transparent = _resolve_opacity(opacity, diffuse)
    return MeshPhongMaterial(
        color=diffuse.to_hex(),
        ambient=as_color(ambient if ambient is not None else BLACK).to_hex(),
        emissive=as_color(emissive if emissive is not None else BLACK).to_hex(),
        specular=as_color(specular if specular is not None else DARK_GRAY).to_hex(),
        shininess=DEFAULT_SHININESS if shininess is None else float(shininess),
        opacity=resolved,
        transparent=transparent,
        wireframe=False,
    )


def encode_lambert_material(
    color: ColorLike,
    ambient: ColorLike | None = None,
    emissive: ColorLike | None = None,
    opacity: float | None = None,
) -> MeshLambertMaterial:
    """Create a matte mesh material."""
    diffuse = as_color(color)
    resolved, transparent = _resolve_opacity(opacity, diffuse)
    return MeshLambertMaterial(
        color=diffuse.to_hex(),
        ambient=as_color(ambient if ambient is not None else BLACK).to_hex(),
        emissive=as_color(emissive if emissive is not None else BLACK).to_hex(),
        opacity=resolved,
        transparent=transparent,
    )


def encode_basic_material(color: ColorLike, opacity: float | None = None) -> MeshBasicMaterial:
    """Create an unlit mesh material."""
    diffuse = as_color(color)
    resolved, transparent = _resolve_opacity(opacity, diffuse)
    return MeshBasicMaterial(color=diffuse.to_hex(), opacity=resolved, transparent=transparent)


def encode_line_material(
    color: ColorLike,
    linewidth: float | None = None,
    opacity: float | None = None,
) -> LineBasicMaterial:
    """Create a polyline material."""
    diffuse = as_color(color)
    resolved, _ = _resolve_opacity(opacity, diffuse)
    if linewidth is None:
        linewidth = DEFAULT_LINEWIDTH
    elif linewidth <= 0:
        logger.warning("Line width must be positive, got %s; defaulting back to 1.", linewidth)
        linewidth = DEFAULT_LINEWIDTH
    return LineBasicMaterial(color=diffuse.to_hex(), linewidth=float(linewidth), opacity=resolved)
