"""Ear-clipping triangulation of planar polygons.

Each polygon is projected onto the coordinate plane most orthogonal to its
Newell normal. Convexity and containment tests run on the field's scalars,
so they are exact for the exact fields.
"""

from __future__ import annotations

import logging

from ._cleaning import drop_repeats

logger = logging.getLogger(__name__)


def newell_normal(points: list[tuple], face: list[int]) -> tuple:
    nx = ny = nz = 0
    for a, b in zip(face, face[1:] + face[:1]):
        xa, ya, za = points[a]
        xb, yb, zb = points[b]
        nx += (ya - yb) * (za + zb)
        ny += (za - zb) * (xa + xb)
        nz += (xa - xb) * (ya + yb)
    return nx, ny, nz


def _cross(o: tuple, a: tuple, b: tuple) -> object:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _fan(face: list[int]) -> list[list[int]]:
    return [[face[0], face[k], face[k + 1]] for k in range(1, len(face) - 1)]


def triangulate_polygon(points: list[tuple], face: list[int]) -> list[list[int]]:
    """Split one polygon into triangles that keep its winding."""
    face = drop_repeats(list(face))
    if len(face) < 3:
        return []
    if len(face) == 3:
        return [list(face)]

    normal = newell_normal(points, face)
    axis = max(range(3), key=lambda k: abs(normal[k]))
    if normal[axis] == 0:
        logger.debug(f"Degenerate polygon {face}: falling back to a fan")
        return _fan(face)
    sign = 1 if normal[axis] > 0 else -1
    u, v = (axis + 1) % 3, (axis + 2) % 3
    uv = {i: (points[i][u], points[i][v]) for i in face}

    def inside(p: tuple, a: tuple, b: tuple, c: tuple) -> bool:
        if p == a or p == b or p == c:
            return False
        return (
            sign * _cross(a, b, p) >= 0
            and sign * _cross(b, c, p) >= 0
            and sign * _cross(c, a, p) >= 0
        )

    ring = list(face)
    triangles: list[list[int]] = []
    while len(ring) > 3:
        m = len(ring)
        for k in range(m):
            a, b, c = ring[k - 1], ring[k], ring[(k + 1) % m]
            pa, pb, pc = uv[a], uv[b], uv[c]
            if sign * _cross(pa, pb, pc) <= 0:
                continue
            if any(inside(uv[w], pa, pb, pc) for w in ring if w not in (a, b, c)):
                continue
            triangles.append([a, b, c])
            del ring[k]
            break
        else:
            logger.debug(f"No ear left in polygon {face}: fanning the remaining {m} vertices")
            triangles.extend(_fan(ring))
            return triangles
    triangles.append(ring)
    return triangles


def triangulate_faces(points: list[tuple], faces: list[list[int]]) -> list[list[int]]:
    triangles: list[list[int]] = []
    for face in faces:
        triangles.extend(triangulate_polygon(points, face))
    logger.info(f"Triangulation: {len(faces)} faces -> {len(triangles)} triangles")
    return triangles
