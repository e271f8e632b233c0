"""Render Converter: processed mesh -> strict triangle/quad structure.

The render mesh is what an external renderer consumes; `to_trimesh`
hands it to trimesh, which only knows triangles, so quads are split there.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from meshops.core.contracts import RenderClass
from meshops.core.errors import UnsupportedConversionError
from .data import ProcessedMesh

logger = logging.getLogger(__name__)


@dataclass
class RenderMesh:
    """Triangles and/or quads over a shared vertex buffer."""

    vertices: np.ndarray  # (N, 3) float64
    normals: np.ndarray | None = None  # (N, 3)
    triangles: np.ndarray | None = None  # (T, 3)
    quads: np.ndarray | None = None  # (Q, 4)
    extras: dict[str, Any] = field(default_factory=dict)

    def to_vertices_faces(self) -> tuple[np.ndarray, list[list[int]]]:
        """Vertices and faces (triangles first, then quads) for a rebuild."""
        faces: list[list[int]] = []
        for block in (self.triangles, self.quads):
            if block is not None:
                faces.extend(block.tolist())
        return self.vertices, faces

    def to_trimesh(self, **kwargs: Any):
        """Build a `trimesh.Trimesh`; keyword arguments go to its constructor."""
        import trimesh

        blocks = []
        if self.triangles is not None:
            blocks.append(np.asarray(self.triangles, dtype=np.int64))
        if self.quads is not None:
            blocks.append(trimesh.geometry.triangulate_quads(self.quads))
        faces = np.vstack(blocks) if blocks else np.zeros((0, 3), dtype=np.int64)

        return trimesh.Trimesh(
            vertices=self.vertices,
            faces=faces,
            vertex_normals=self.normals,
            process=False,
            **kwargs,
        )


def to_renderable(mesh: ProcessedMesh, **extras: Any) -> RenderMesh:
    """Convert a processed mesh to a render mesh.

    Args:
        mesh: Output of `build_mesh` or `split_connected_components`.
        **extras: Passed through untouched in `RenderMesh.extras`.

    Raises:
        TypeError: if `mesh` is not a `ProcessedMesh`.
        UnsupportedConversionError: if some face has more than four sides.
    """
    if not isinstance(mesh, ProcessedMesh):
        raise TypeError(
            "The `mesh` argument must be a ProcessedMesh (e.g. an output of `build_mesh`)."
        )
    if mesh.render_class is RenderClass.NONE:
        raise UnsupportedConversionError(
            "Impossible to convert this mesh to a render mesh "
            "(the faces must have at most four sides)."
        )

    render = RenderMesh(vertices=mesh.vertices, normals=mesh.normals, extras=dict(extras))
    if mesh.render_class is RenderClass.TRIANGLE:
        render.triangles = np.asarray(mesh.faces, dtype=np.intp).reshape(-1, 3)
    elif mesh.render_class is RenderClass.QUAD:
        render.quads = np.asarray(mesh.faces, dtype=np.intp).reshape(-1, 4)
    else:
        faces = mesh.face_list()
        render.triangles = np.array([f for f in faces if len(f) == 3], dtype=np.intp).reshape(-1, 3)
        render.quads = np.array([f for f in faces if len(f) == 4], dtype=np.intp).reshape(-1, 4)

    logger.debug(
        f"Render mesh ({mesh.render_class.value}): "
        f"{0 if render.triangles is None else len(render.triangles)} triangles, "
        f"{0 if render.quads is None else len(render.quads)} quads"
    )
    return render
