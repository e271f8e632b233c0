"""Result Assembler: raw kernel output -> `ProcessedMesh`."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from meshops.core.contracts import RenderClass
from meshops.kernel import RawKernelOutput
from .classification import classify_face_sizes, homogeneous_face_size
from .data import EdgeTable, FaceStorage, ProcessedMesh

logger = logging.getLogger(__name__)


def edge_table(columns: dict[str, np.ndarray]) -> EdgeTable:
    """Build an `EdgeTable` from the kernel's edge columns."""
    return EdgeTable(
        i1=np.asarray(columns["i1"], dtype=np.intp),
        i2=np.asarray(columns["i2"], dtype=np.intp),
        length=np.asarray(columns["length"], dtype=np.float64),
        angle=np.asarray(columns["angle"], dtype=np.float64),
        face_count=np.asarray(columns["face_count"], dtype=np.intp),
    )


def _rows(buffer: np.ndarray | None) -> np.ndarray | None:
    """(3, N) kernel layout -> (N, 3)."""
    if buffer is None:
        return None
    return np.ascontiguousarray(np.asarray(buffer, dtype=np.float64).reshape(3, -1).T)


def _face_storage(faces: list[list[int]], rectangular: bool) -> FaceStorage:
    if rectangular and faces:
        return np.asarray(faces, dtype=np.intp)
    return [list(face) for face in faces]


def assemble(
    raw: RawKernelOutput,
    numeric_policy: str = "approximate",
    render_class: RenderClass | None = None,
    advisories: Iterable[str] = (),
) -> ProcessedMesh:
    """Reshape one kernel output into a processed mesh.

    Args:
        raw: Kernel output, coordinates in (3, N) layout.
        numeric_policy: Policy the kernel ran with; 'exact_rational' keeps
            the exact coordinates next to their float approximation.
        render_class: Classification computed before the kernel ran. When
            None it is derived from the output faces.
        advisories: Non-fatal notices to attach to the result.
    """
    exact_vertices = None
    if numeric_policy == "exact_rational":
        exact_vertices = np.empty((raw.vertices.shape[1], 3), dtype=object)
        exact_vertices[:] = raw.vertices.T
        vertices = exact_vertices.astype(np.float64)
    else:
        vertices = _rows(raw.vertices)

    sizes = [len(face) for face in raw.faces]
    rectangular = raw.triangulated or homogeneous_face_size(sizes) is not None

    if raw.triangulated:
        final_class = RenderClass.TRIANGLE
    elif render_class is not None:
        final_class = render_class
    else:
        final_class = classify_face_sizes(sizes)

    mesh = ProcessedMesh(
        vertices=vertices,
        faces=_face_storage(raw.faces, rectangular),
        edges_table=edge_table(raw.edges),
        render_class=final_class,
        numeric_policy=numeric_policy,
        normals=_rows(raw.normals),
        exact_vertices=exact_vertices,
        triangulated=raw.triangulated,
        advisories=list(advisories),
    )
    if raw.triangulated and raw.edges0 is not None:
        mesh.edges0_table = edge_table(raw.edges0)
        mesh.normals0 = _rows(raw.normals0)

    logger.debug(
        f"Assembled mesh: {mesh.n_vertices} vertices, {mesh.n_faces} faces, "
        f"{len(mesh.edges_table)} edges ({int(mesh.edges_table.exterior.sum())} exterior)"
    )
    return mesh
