"""Surface kernel: one implementation, parameterised by a number field.

The three numeric policies share this input/output contract and differ
only in the scalars used for predicates and in the output coordinates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
from pydantic import BaseModel, Field

from meshops.mesh.data import CanonicalMesh
from ._cleaning import clean_soup
from ._measures import edge_columns, vertex_normals
from ._topology import face_components, orient_faces
from ._triangulation import triangulate_faces
from .fields import NumberField

logger = logging.getLogger(__name__)


class KernelOptions(BaseModel):
    is_triangle: bool = Field(False, description="The input mesh is a pure triangle mesh")
    triangulate: bool = Field(False, description="Triangulate non-triangular faces")
    clean: bool = Field(False, description="Merge duplicates and drop isolated vertices")
    normals: bool = Field(False, description="Compute per-vertex normals")


@dataclass
class RawKernelOutput:
    """Kernel result in its native layout: coordinates are (3, N)."""

    vertices: np.ndarray
    faces: list[list[int]]
    edges: dict[str, np.ndarray]
    normals: np.ndarray | None = None
    edges0: dict[str, np.ndarray] | None = None
    normals0: np.ndarray | None = None
    triangulated: bool = False


class SurfaceKernel:
    def __init__(self, field: NumberField):
        self.field = field

    @property
    def name(self) -> str:
        return self.field.name

    def invoke(self, mesh: CanonicalMesh, options: KernelOptions) -> RawKernelOutput:
        """Orient, optionally clean and triangulate, and measure one mesh."""
        points, faces = self._prepare(mesh, options)
        return self._finish(points, faces, options)

    def connected_components(
        self, mesh: CanonicalMesh, options: KernelOptions
    ) -> list[RawKernelOutput]:
        """Same as `invoke`, once per edge-connected piece, each re-indexed densely."""
        points, faces = self._prepare(mesh, options)
        outputs: list[RawKernelOutput] = []
        for component in face_components(faces):
            comp_faces = [faces[f] for f in component]
            used = sorted({v for face in comp_faces for v in face})
            remap = {old: new for new, old in enumerate(used)}
            outputs.append(
                self._finish(
                    [points[i] for i in used],
                    [[remap[v] for v in face] for face in comp_faces],
                    options,
                )
            )
        return outputs

    def _prepare(
        self, mesh: CanonicalMesh, options: KernelOptions
    ) -> tuple[list[tuple], list[list[int]]]:
        points = self.field.to_internal(mesh.vertices)
        faces = [list(face) for face in mesh.faces]
        if options.clean:
            points, faces = clean_soup(points, faces)
        return points, orient_faces(points, faces)

    def _finish(
        self, points: list[tuple], faces: list[list[int]], options: KernelOptions
    ) -> RawKernelOutput:
        xyz = self.field.to_float(points)
        split = (
            options.triangulate
            and not options.is_triangle
            and any(len(face) > 3 for face in faces)
        )

        edges0 = normals0 = None
        if split:
            edges0 = edge_columns(xyz, faces)
            if options.normals:
                normals0 = vertex_normals(xyz, faces).T.copy()
            faces = triangulate_faces(points, faces)

        return RawKernelOutput(
            vertices=self.field.to_output(points),
            faces=faces,
            edges=edge_columns(xyz, faces),
            normals=vertex_normals(xyz, faces).T.copy() if options.normals else None,
            edges0=edges0,
            normals0=normals0,
            triangulated=split,
        )
