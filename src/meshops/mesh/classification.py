"""Render classification: derived purely from the multiset of face sizes."""

from __future__ import annotations

from collections.abc import Iterable

from meshops.core.contracts import RenderClass


def homogeneous_face_size(sizes: Iterable[int]) -> int | None:
    """Return the common face size, or None when faces are mixed."""
    distinct = set(int(s) for s in sizes)
    if len(distinct) == 1:
        return distinct.pop()
    return None


def classify_face_sizes(sizes: Iterable[int]) -> RenderClass:
    """Classify a face-size multiset.

    {3} -> TRIANGLE, {4} -> QUAD, {3, 4} -> MIXED_TRI_QUAD, anything else -> NONE.
    """
    distinct = set(int(s) for s in sizes)
    if distinct == {3}:
        return RenderClass.TRIANGLE
    if distinct == {4}:
        return RenderClass.QUAD
    if distinct == {3, 4}:
        return RenderClass.MIXED_TRI_QUAD
    return RenderClass.NONE
