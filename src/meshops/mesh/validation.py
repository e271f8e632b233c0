"""Validator: normalizes raw vertex/face input into a `CanonicalMesh`.

Vertices must form an (N, 3) table. Faces are accepted either as a regular
2-D numpy array (one row per face) or as an irregular list of index
sequences. Indices are checked against the vertex count and shifted to the
0-based convention of the kernel.
"""

from __future__ import annotations

import logging
import numbers
from fractions import Fraction
from typing import Any

import numpy as np

from meshops.core.errors import MeshValidationError
from .classification import classify_face_sizes, homogeneous_face_size
from .data import CanonicalMesh

logger = logging.getLogger(__name__)

_VERTICES_SHAPE = "The `vertices` argument must be a matrix with three columns."
_FACES_TYPE = "The `faces` argument must be a list or a matrix."
_FACES_MIN_SIZE = "Faces must be given by at least three indices."


def _is_missing(x: Any) -> bool:
    if x is None:
        return True
    if isinstance(x, (float, np.floating)):
        return bool(np.isnan(x))
    return False


def _is_bool(x: Any) -> bool:
    return isinstance(x, (bool, np.bool_))


def _vertex_table(vertices: Any) -> np.ndarray:
    """Coerce the input into a 2-D object or numeric array with 3 columns."""
    if isinstance(vertices, np.ndarray):
        table = vertices
    else:
        try:
            table = np.array(vertices, dtype=object)
        except (ValueError, TypeError):
            raise MeshValidationError(_VERTICES_SHAPE) from None
    if table.ndim != 2 or table.shape[1] != 3:
        raise MeshValidationError(_VERTICES_SHAPE)
    if table.shape[0] == 0:
        raise MeshValidationError("The `vertices` argument must have at least one row.")
    return table


def _as_fraction(x: Any) -> Fraction:
    if isinstance(x, Fraction):
        return x
    if isinstance(x, numbers.Integral):
        return Fraction(int(x))
    return Fraction(int(x.numerator), int(x.denominator))


def _check_vertices(vertices: Any, exact_rational: bool) -> np.ndarray:
    table = _vertex_table(vertices)

    if table.dtype.kind in "iuf" and not exact_rational:
        coords = table.astype(np.float64)
        if np.isnan(coords).any():
            raise MeshValidationError("Found missing values in `vertices`.")
        return coords

    flat = table.ravel()
    if any(_is_missing(x) for x in flat):
        raise MeshValidationError("Found missing values in `vertices`.")

    if exact_rational:
        if not all(isinstance(x, numbers.Rational) and not _is_bool(x) for x in flat):
            raise MeshValidationError(
                "With the 'exact_rational' policy, `vertices` must contain exact "
                "rational numbers (Fraction or int), not floating point numbers."
            )
        exact = np.empty(table.shape, dtype=object)
        exact.ravel()[:] = [_as_fraction(x) for x in flat]
        return exact

    if not all(isinstance(x, numbers.Real) and not _is_bool(x) for x in flat):
        raise MeshValidationError("The `vertices` argument must contain real numbers.")
    return table.astype(np.float64)


def _as_index(x: Any) -> int:
    if _is_missing(x):
        raise MeshValidationError("Found missing values in `faces`.")
    if _is_bool(x) or not isinstance(x, numbers.Real):
        raise MeshValidationError("Faces must contain integer indices.")
    if isinstance(x, numbers.Integral):
        return int(x)
    if float(x).is_integer():
        return int(x)
    raise MeshValidationError("Faces must contain integer indices.")


def _check_regular_faces(faces: np.ndarray) -> list[list[int]]:
    if faces.ndim != 2:
        raise MeshValidationError(_FACES_TYPE)
    if faces.shape[1] < 3:
        raise MeshValidationError(_FACES_MIN_SIZE)
    if faces.dtype.kind in "iu":
        return faces.astype(np.int64).tolist()
    if faces.dtype.kind == "f" and np.isnan(faces).any():
        raise MeshValidationError("Found missing values in `faces`.")
    return [[_as_index(x) for x in row] for row in faces.tolist()]


def _check_irregular_faces(faces: list | tuple) -> list[list[int]]:
    rows: list[list[int]] = []
    for face in faces:
        if isinstance(face, (str, bytes)) or not isinstance(face, (list, tuple, np.ndarray)):
            raise MeshValidationError("The `faces` argument must be a list of integer vectors.")
        if isinstance(face, np.ndarray) and face.ndim != 1:
            raise MeshValidationError("The `faces` argument must be a list of integer vectors.")
        items = face.tolist() if isinstance(face, np.ndarray) else list(face)
        if any(isinstance(x, (list, tuple, np.ndarray)) for x in items):
            raise MeshValidationError("The `faces` argument must be a list of integer vectors.")
        rows.append([_as_index(x) for x in items])
    return rows


def validate(
    vertices: Any,
    faces: Any,
    numeric_policy: str = "approximate",
    index_origin: int = 0,
) -> CanonicalMesh:
    """Validate raw input and return the canonical mesh.

    Args:
        vertices: (N, 3) table of coordinates. Under 'exact_rational' every
            entry must be a `Fraction` or an integer.
        faces: 2-D integer array (one face per row) or a list of index
            sequences.
        numeric_policy: 'approximate', 'exact_symbolic' or 'exact_rational'.
        index_origin: Index of the first vertex in `faces` (0 or 1).

    Returns:
        CanonicalMesh with 0-based faces.

    Raises:
        MeshValidationError: on any malformed input.
    """
    coords = _check_vertices(vertices, exact_rational=numeric_policy == "exact_rational")
    n_vertices = len(coords)

    if isinstance(faces, np.ndarray):
        rows = _check_regular_faces(faces)
    elif isinstance(faces, (list, tuple)):
        rows = _check_irregular_faces(faces)
    else:
        raise MeshValidationError(_FACES_TYPE)

    if not rows:
        raise MeshValidationError("The mesh must have at least one face.")

    sizes = [len(face) for face in rows]
    if min(sizes) < 3:
        raise MeshValidationError(_FACES_MIN_SIZE)

    upper = n_vertices + index_origin
    for face in rows:
        if min(face) < index_origin or max(face) >= upper:
            raise MeshValidationError(
                f"Faces cannot contain indices lower than {index_origin} or "
                f"higher than {upper - 1} (the mesh has {n_vertices} vertices)."
            )
        if len(set(face)) < 3:
            raise MeshValidationError("Faces must be given by at least three distinct vertices.")

    if index_origin:
        rows = [[i - index_origin for i in face] for face in rows]

    size = homogeneous_face_size(sizes)
    render_class = classify_face_sizes(sizes)
    logger.debug(
        f"Validated mesh: {n_vertices} vertices, {len(rows)} faces, "
        f"face size {size if size is not None else 'mixed'}, render class {render_class.value}"
    )
    return CanonicalMesh(
        vertices=coords,
        faces=rows,
        homogeneous_face_size=size,
        render_class=render_class,
        numeric_policy=numeric_policy,
    )
