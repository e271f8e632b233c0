"""Edge drawing: edges as tubes or lines, vertices as spheres, in a trimesh Scene."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

logger = logging.getLogger(__name__)


def edges_scene(
    vertices: np.ndarray,
    edges: np.ndarray,
    color: Sequence[float] = (0.0, 0.0, 0.0, 1.0),
    line_width: float = 2.0,
    edges_as_tubes: bool = True,
    tube_radius: float = 0.03,
    vertices_as_spheres: bool = True,
    only: Sequence[int] | None = None,
    sphere_radius: float = 0.05,
    sphere_color: Sequence[float] | None = None,
):
    """Build a scene showing the given edges.

    Args:
        vertices: (N, 3) vertex coordinates.
        edges: (E, 2) vertex index pairs, e.g. `mesh.edges` or `mesh.exterior_edges`.
        color: RGBA (0-1) color of the edges.
        line_width: Width stored on the path when `edges_as_tubes` is False.
        edges_as_tubes: Draw edges as cylinders instead of line segments.
        tube_radius: Cylinder radius.
        vertices_as_spheres: Also draw vertices as spheres.
        only: Indices of the vertices to draw as spheres (None = all).
        sphere_radius: Sphere radius.
        sphere_color: RGBA (0-1) color of the spheres, defaults to `color`.

    Returns:
        trimesh.Scene
    """
    import trimesh

    vertices = np.asarray(vertices, dtype=np.float64)
    edges = np.asarray(edges, dtype=np.intp).reshape(-1, 2)
    rgba = trimesh.visual.color.to_rgba(np.asarray(color, dtype=np.float64))
    scene = trimesh.Scene()

    if edges_as_tubes:
        for k, (i, j) in enumerate(edges):
            if np.allclose(vertices[i], vertices[j]):
                continue
            tube = trimesh.creation.cylinder(
                radius=tube_radius, segment=vertices[[i, j]], sections=32
            )
            tube.visual.face_colors = rgba
            scene.add_geometry(tube, node_name=f"edge_{k}")
    elif len(edges):
        path = trimesh.load_path(vertices[edges])
        path.colors = np.tile(rgba, (len(path.entities), 1))
        path.metadata["line_width"] = line_width
        scene.add_geometry(path, node_name="edges")

    if vertices_as_spheres:
        sphere_rgba = rgba if sphere_color is None else trimesh.visual.color.to_rgba(
            np.asarray(sphere_color, dtype=np.float64)
        )
        indices = range(len(vertices)) if only is None else only
        for i in indices:
            sphere = trimesh.creation.icosphere(subdivisions=2, radius=sphere_radius)
            sphere.apply_translation(vertices[i])
            sphere.visual.face_colors = sphere_rgba
            scene.add_geometry(sphere, node_name=f"vertex_{i}")

    logger.debug(f"Edge scene: {len(edges)} edges, {len(scene.geometry)} geometries")
    return scene
