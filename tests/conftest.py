"""Shared pytest fixtures for meshops tests."""

from pathlib import Path

import numpy as np
import pytest
import yaml

from meshops.mesh import shapes


@pytest.fixture
def tetrahedron() -> tuple[np.ndarray, np.ndarray]:
    """Tetrahedron with ill-oriented faces."""
    return shapes.tetrahedron()


@pytest.fixture
def two_tetrahedra() -> tuple[np.ndarray, np.ndarray]:
    """Two disjoint tetrahedra sharing one vertex/face buffer."""
    v1, f1 = shapes.tetrahedron()
    v2, f2 = shapes.tetrahedron(offset=5.0)
    return np.vstack([v1, v2]), np.vstack([f1, f2 + len(v1)])


@pytest.fixture
def cube() -> tuple[np.ndarray, np.ndarray]:
    return shapes.cube(2.0)


@pytest.fixture
def pyramid() -> tuple[np.ndarray, list[list[int]]]:
    return shapes.square_pyramid()


@pytest.fixture
def prism() -> tuple[np.ndarray, list[list[int]]]:
    return shapes.pentagonal_prism()


@pytest.fixture
def open_square() -> tuple[np.ndarray, np.ndarray]:
    """Unit square split into two triangles: an open surface."""
    vertices = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 0.0],
    ])
    faces = np.array([[0, 1, 2], [0, 2, 3]])
    return vertices, faces


@pytest.fixture
def tetrahedron_yaml(tmp_path: Path, tetrahedron) -> Path:
    """Tetrahedron written as a YAML mesh file."""
    vertices, faces = tetrahedron
    mesh_file = tmp_path / "tetrahedron.yaml"
    with open(mesh_file, "w") as f:
        yaml.dump({"vertices": vertices.tolist(), "faces": faces.tolist()}, f)
    return mesh_file
