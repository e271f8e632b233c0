"""Float measurements: face/vertex normals and the edge table columns."""

from __future__ import annotations

import numpy as np

from ._topology import edge_incidences


def face_normals(xyz: np.ndarray, faces: list[list[int]]) -> np.ndarray:
    """(F, 3) unit Newell normals; degenerate faces get a zero normal."""
    normals = np.zeros((len(faces), 3), dtype=np.float64)
    for f, face in enumerate(faces):
        p = xyz[face]
        q = np.roll(p, -1, axis=0)
        normals[f] = [
            np.sum((p[:, 1] - q[:, 1]) * (p[:, 2] + q[:, 2])),
            np.sum((p[:, 2] - q[:, 2]) * (p[:, 0] + q[:, 0])),
            np.sum((p[:, 0] - q[:, 0]) * (p[:, 1] + q[:, 1])),
        ]
    norms = np.linalg.norm(normals, axis=1, keepdims=True)
    # Avoid division by zero for degenerate faces
    norms = np.maximum(norms, 1e-12)
    return normals / norms


def vertex_normals(xyz: np.ndarray, faces: list[list[int]]) -> np.ndarray:
    """(N, 3) unit vertex normals: normalized sum of incident unit face normals."""
    fn = face_normals(xyz, faces)
    acc = np.zeros_like(xyz, dtype=np.float64)
    for f, face in enumerate(faces):
        acc[face] += fn[f]
    norms = np.maximum(np.linalg.norm(acc, axis=1, keepdims=True), 1e-12)
    return acc / norms


def edge_columns(xyz: np.ndarray, faces: list[list[int]]) -> dict[str, np.ndarray]:
    """Edge table as columns i1, i2, length, angle, face_count, sorted by (i1, i2).

    `angle` is the unsigned dihedral angle in degrees (180 for coplanar
    faces) and NaN unless the edge is shared by exactly two faces.
    """
    incidences = edge_incidences(faces)
    keys = sorted(incidences)
    n = len(keys)
    i1 = np.fromiter((k[0] for k in keys), dtype=np.intp, count=n)
    i2 = np.fromiter((k[1] for k in keys), dtype=np.intp, count=n)
    face_count = np.fromiter((len(incidences[k]) for k in keys), dtype=np.intp, count=n)
    length = np.linalg.norm(xyz[i2] - xyz[i1], axis=1) if n else np.zeros(0)

    fn = face_normals(xyz, faces)
    angle = np.full(n, np.nan)
    for e, key in enumerate(keys):
        occurrences = incidences[key]
        if len(occurrences) != 2:
            continue
        cos_theta = float(np.clip(fn[occurrences[0][0]] @ fn[occurrences[1][0]], -1.0, 1.0))
        angle[e] = 180.0 - np.degrees(np.arccos(cos_theta))

    return {
        "i1": i1,
        "i2": i2,
        "length": length,
        "angle": angle,
        "face_count": face_count,
    }
