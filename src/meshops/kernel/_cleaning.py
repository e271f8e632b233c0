"""Polygon-soup cleaning: duplicated points, duplicated faces, isolated points."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def drop_repeats(face: list[int]) -> list[int]:
    """Remove consecutive repeated indices (including across the loop closure)."""
    out: list[int] = []
    for v in face:
        if not out or out[-1] != v:
            out.append(v)
    while len(out) > 1 and out[0] == out[-1]:
        out.pop()
    return out


def merge_duplicate_points(
    points: list[tuple], faces: list[list[int]]
) -> tuple[list[tuple], list[list[int]]]:
    """Merge points with exactly equal coordinates, keeping the first occurrence."""
    index_of: dict[tuple, int] = {}
    remap: list[int] = []
    merged: list[tuple] = []
    for point in points:
        key = tuple(point)
        if key not in index_of:
            index_of[key] = len(merged)
            merged.append(point)
        remap.append(index_of[key])

    new_faces = []
    for face in faces:
        face = drop_repeats([remap[v] for v in face])
        if len(set(face)) >= 3:
            new_faces.append(face)
    return merged, new_faces


def _cycle_key(face: list[int]) -> tuple[int, ...]:
    """Same key for every rotation and both windings of a polygon."""
    def rotated(seq: list[int]) -> tuple[int, ...]:
        k = seq.index(min(seq))
        return tuple(seq[k:] + seq[:k])

    return min(rotated(face), rotated(face[::-1]))


def remove_duplicate_faces(faces: list[list[int]]) -> list[list[int]]:
    seen: set[tuple[int, ...]] = set()
    unique: list[list[int]] = []
    for face in faces:
        key = _cycle_key(face)
        if key not in seen:
            seen.add(key)
            unique.append(face)
    return unique


def remove_isolated_points(
    points: list[tuple], faces: list[list[int]]
) -> tuple[list[tuple], list[list[int]]]:
    used = sorted({v for face in faces for v in face})
    remap = {old: new for new, old in enumerate(used)}
    return [points[i] for i in used], [[remap[v] for v in face] for face in faces]


def clean_soup(
    points: list[tuple], faces: list[list[int]]
) -> tuple[list[tuple], list[list[int]]]:
    """Merge duplicated points and faces, then drop unreferenced points."""
    n_points, n_faces = len(points), len(faces)
    points, faces = merge_duplicate_points(points, faces)
    faces = remove_duplicate_faces(faces)
    points, faces = remove_isolated_points(points, faces)
    logger.info(
        f"Cleaning: {n_points} -> {len(points)} vertices, {n_faces} -> {len(faces)} faces"
    )
    return points, faces
