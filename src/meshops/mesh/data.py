"""Mesh values passed between the validator, the kernel and the assembler."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from meshops.core.contracts import RenderClass

FaceStorage = Union[np.ndarray, list]


@dataclass
class CanonicalMesh:
    """Validated, 0-based mesh handed to the kernel.

    `vertices` is (N, 3) float64, or an object array of `Fraction` under the
    exact-rational policy. `faces` is always a list of index lists.
    """

    vertices: np.ndarray
    faces: list[list[int]]
    homogeneous_face_size: int | None
    render_class: RenderClass
    numeric_policy: str = "approximate"

    @property
    def is_triangle_mesh(self) -> bool:
        return self.homogeneous_face_size == 3

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)


@dataclass
class EdgeTable:
    """Undirected edges as parallel columns, sorted by (i1, i2) with i1 < i2."""

    i1: np.ndarray
    i2: np.ndarray
    length: np.ndarray
    angle: np.ndarray  # dihedral angle in degrees, NaN unless shared by exactly 2 faces
    face_count: np.ndarray

    @property
    def exterior(self) -> np.ndarray:
        """Boundary (1 face) and non-manifold (3+ faces) edges."""
        return self.face_count != 2

    @property
    def boundary(self) -> np.ndarray:
        return self.face_count == 1

    @property
    def non_manifold(self) -> np.ndarray:
        return self.face_count > 2

    @property
    def pairs(self) -> np.ndarray:
        """(E, 2) array of vertex index pairs."""
        return np.column_stack([self.i1, self.i2]).astype(np.intp).reshape(-1, 2)

    def __len__(self) -> int:
        return len(self.i1)


@dataclass
class ProcessedMesh:
    """Kernel output reassembled into a self-describing mesh."""

    vertices: np.ndarray  # (N, 3) float64
    faces: FaceStorage  # (F, k) array when homogeneous, else list of index lists
    edges_table: EdgeTable
    render_class: RenderClass
    numeric_policy: str = "approximate"
    normals: np.ndarray | None = None
    exact_vertices: np.ndarray | None = None
    triangulated: bool = False
    edges0_table: EdgeTable | None = None
    normals0: np.ndarray | None = None
    advisories: list[str] = field(default_factory=list)

    @property
    def edges(self) -> np.ndarray:
        return self.edges_table.pairs

    @property
    def edges0(self) -> np.ndarray | None:
        if self.edges0_table is None:
            return None
        return self.edges0_table.pairs

    @property
    def exterior_edges(self) -> np.ndarray:
        return self.edges[self.edges_table.exterior]

    @property
    def exterior_vertices(self) -> np.ndarray:
        return np.unique(self.exterior_edges.ravel()).astype(np.intp)

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        return len(self.faces)

    @property
    def is_triangle(self) -> bool:
        return self.render_class is RenderClass.TRIANGLE

    @property
    def is_renderable(self) -> bool:
        return self.render_class is not RenderClass.NONE

    def face_list(self) -> list[list[int]]:
        """Faces as a list of index lists, whatever the storage."""
        return [[int(i) for i in face] for face in self.faces]

    def summary(self) -> str:
        lines = [f"Mesh with {self.n_vertices} vertices and {self.n_faces} faces."]
        if len(self.edges_table):
            lo = float(np.min(self.edges_table.length))
            hi = float(np.max(self.edges_table.length))
            lines.append(f"The edge lengths vary from {lo:.6g} to {hi:.6g}.")
        lines.append(f"This mesh {'is' if self.is_triangle else 'is not'} triangle.")
        lines.append(
            f"This mesh {'can' if self.is_renderable else 'cannot'} "
            "be converted to a render mesh (see `to_renderable`)."
        )
        lines.append(
            f"This mesh {'has' if self.normals is not None else 'does not have'} vertex normals."
        )
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()
