"""Small sample meshes, as (vertices, faces) pairs."""

from __future__ import annotations

import numpy as np


def tetrahedron(offset: float = 0.0) -> tuple[np.ndarray, np.ndarray]:
    """Regular tetrahedron whose faces are deliberately ill-oriented."""
    vertices = np.array([
        [-1.0, -1.0, -1.0],
        [1.0, 1.0, -1.0],
        [1.0, -1.0, 1.0],
        [-1.0, 1.0, 1.0],
    ]) + offset
    faces = np.array([
        [0, 1, 2],
        [2, 3, 1],
        [3, 1, 0],
        [3, 2, 0],
    ])
    return vertices, faces


def cube(size: float = 1.0) -> tuple[np.ndarray, np.ndarray]:
    """Axis-aligned cube with six quad faces oriented outward."""
    hs = size / 2.0
    vertices = np.array([
        [-hs, -hs, -hs],
        [hs, -hs, -hs],
        [hs, hs, -hs],
        [-hs, hs, -hs],
        [-hs, -hs, hs],
        [hs, -hs, hs],
        [hs, hs, hs],
        [-hs, hs, hs],
    ])
    faces = np.array([
        [0, 3, 2, 1],  # -Z
        [4, 5, 6, 7],  # +Z
        [0, 1, 5, 4],  # -Y
        [2, 3, 7, 6],  # +Y
        [0, 4, 7, 3],  # -X
        [1, 2, 6, 5],  # +X
    ])
    return vertices, faces


def square_pyramid() -> tuple[np.ndarray, list[list[int]]]:
    """Pyramid on a square base: one quad and four triangles."""
    vertices = np.array([
        [-1.0, -1.0, 0.0],
        [1.0, -1.0, 0.0],
        [1.0, 1.0, 0.0],
        [-1.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
    ])
    faces = [[0, 3, 2, 1], [0, 1, 4], [1, 2, 4], [2, 3, 4], [3, 0, 4]]
    return vertices, faces


def pentagonal_prism() -> tuple[np.ndarray, list[list[int]]]:
    """Prism on a regular pentagon: two pentagons and five quads."""
    angles = 2.0 * np.pi * np.arange(5) / 5.0
    ring = np.column_stack([np.cos(angles), np.sin(angles)])
    vertices = np.vstack([
        np.column_stack([ring, np.zeros(5)]),
        np.column_stack([ring, np.ones(5)]),
    ])
    faces = [[4, 3, 2, 1, 0], [5, 6, 7, 8, 9]]
    faces += [[k, (k + 1) % 5, (k + 1) % 5 + 5, k + 5] for k in range(5)]
    return vertices, faces
