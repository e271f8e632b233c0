"""Tests for the validator and the render classification."""

from fractions import Fraction

import numpy as np
import pytest

from meshops.core.contracts import RenderClass
from meshops.core.errors import MeshValidationError
from meshops.mesh.classification import classify_face_sizes, homogeneous_face_size
from meshops.mesh.validation import validate


# ── Classification ──


class TestClassification:
    def test_classes(self):
        assert classify_face_sizes([3, 3, 3]) is RenderClass.TRIANGLE
        assert classify_face_sizes([4, 4]) is RenderClass.QUAD
        assert classify_face_sizes([3, 4, 4, 3]) is RenderClass.MIXED_TRI_QUAD
        assert classify_face_sizes([5, 5]) is RenderClass.NONE
        assert classify_face_sizes([3, 4, 5]) is RenderClass.NONE

    def test_homogeneous_size(self):
        assert homogeneous_face_size([4, 4, 4]) == 4
        assert homogeneous_face_size([3, 4]) is None


# ── Accepted input ──


class TestValidInput:
    def test_regular_faces(self, tetrahedron):
        vertices, faces = tetrahedron
        mesh = validate(vertices, faces)
        assert mesh.vertices.dtype == np.float64
        assert mesh.faces == faces.tolist()
        assert mesh.homogeneous_face_size == 3
        assert mesh.is_triangle_mesh
        assert mesh.render_class is RenderClass.TRIANGLE

    def test_irregular_faces(self, pyramid):
        vertices, faces = pyramid
        mesh = validate(vertices, faces)
        assert mesh.homogeneous_face_size is None
        assert not mesh.is_triangle_mesh
        assert mesh.render_class is RenderClass.MIXED_TRI_QUAD

    def test_quads(self, cube):
        mesh = validate(*cube)
        assert mesh.homogeneous_face_size == 4
        assert mesh.render_class is RenderClass.QUAD

    def test_polygons(self, prism):
        mesh = validate(*prism)
        assert mesh.render_class is RenderClass.NONE

    def test_list_vertices(self):
        mesh = validate([[0, 0, 0], [1, 0, 0], [0, 1, 0]], [(0, 1, 2)])
        assert mesh.vertices.shape == (3, 3)
        assert mesh.faces == [[0, 1, 2]]

    def test_integral_float_indices(self, tetrahedron):
        vertices, faces = tetrahedron
        mesh = validate(vertices, faces.astype(float))
        assert mesh.faces == faces.tolist()

    def test_index_origin_one(self, tetrahedron):
        vertices, faces = tetrahedron
        mesh = validate(vertices, faces + 1, index_origin=1)
        assert mesh.faces == faces.tolist()

    def test_exact_rational(self):
        vertices = [[Fraction(1, 3), 0, 0], [0, Fraction(2, 3), 0], [0, 0, 1]]
        mesh = validate(vertices, [[0, 1, 2]], numeric_policy="exact_rational")
        assert mesh.vertices.dtype == object
        assert mesh.vertices[0, 0] == Fraction(1, 3)
        assert all(isinstance(x, Fraction) for x in mesh.vertices.ravel())

    def test_exact_rational_integer_array(self, tetrahedron):
        vertices, faces = tetrahedron
        mesh = validate(vertices.astype(int), faces, numeric_policy="exact_rational")
        assert mesh.vertices[1, 0] == Fraction(1)


# ── Rejected input ──


class TestInvalidInput:
    def test_vertices_two_columns(self):
        with pytest.raises(MeshValidationError, match="three columns"):
            validate(np.zeros((4, 2)), [[0, 1, 2]])

    def test_ragged_vertices(self):
        with pytest.raises(MeshValidationError, match="three columns"):
            validate([[0, 0, 0], [1, 0]], [[0, 1, 0]])

    def test_no_vertices(self):
        with pytest.raises(MeshValidationError):
            validate(np.zeros((0, 3)), [[0, 1, 2]])

    def test_nan_vertex(self, tetrahedron):
        vertices, faces = tetrahedron
        vertices[2, 1] = np.nan
        with pytest.raises(MeshValidationError, match="missing values in `vertices`"):
            validate(vertices, faces)

    def test_none_vertex(self):
        with pytest.raises(MeshValidationError, match="missing values in `vertices`"):
            validate([[0, 0, 0], [1, None, 0], [0, 1, 0]], [[0, 1, 2]])

    def test_non_numeric_vertex(self):
        with pytest.raises(MeshValidationError, match="real numbers"):
            validate([[0, 0, 0], [1, "a", 0], [0, 1, 0]], [[0, 1, 2]])

    def test_float_vertices_under_exact_rational(self, tetrahedron):
        vertices, faces = tetrahedron
        with pytest.raises(MeshValidationError, match="exact_rational"):
            validate(vertices, faces, numeric_policy="exact_rational")

    def test_faces_wrong_type(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="list or a matrix"):
            validate(vertices, {"a": [0, 1, 2]})

    def test_faces_nested_too_deep(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="integer vectors"):
            validate(vertices, [[[0, 1, 2]]])

    def test_no_faces(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="at least one face"):
            validate(vertices, [])

    def test_face_too_small(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="at least three indices"):
            validate(vertices, [[0, 1, 2], [0, 1]])

    def test_matrix_too_narrow(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="at least three indices"):
            validate(vertices, np.array([[0, 1], [1, 2]]))

    def test_index_out_of_range(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="higher than 3"):
            validate(vertices, [[0, 1, 4]])

    def test_negative_index(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="lower than 0"):
            validate(vertices, [[-1, 1, 2]])

    def test_zero_with_index_origin_one(self, tetrahedron):
        vertices, faces = tetrahedron
        with pytest.raises(MeshValidationError, match="lower than 1"):
            validate(vertices, faces, index_origin=1)

    def test_non_integer_index(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="integer indices"):
            validate(vertices, [[0, 1.5, 2]])

    def test_bool_index(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="integer indices"):
            validate(vertices, [[True, 1, 2]])

    def test_nan_index(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="missing values in `faces`"):
            validate(vertices, np.array([[0.0, 1.0, np.nan]]))

    def test_repeated_index(self, tetrahedron):
        vertices, _ = tetrahedron
        with pytest.raises(MeshValidationError, match="distinct"):
            validate(vertices, [[0, 0, 1]])
