"""Tests for the result assembler and the processed-mesh accessors."""

from fractions import Fraction

import numpy as np

from meshops.core.contracts import RenderClass
from meshops.kernel import RawKernelOutput
from meshops.kernel._measures import edge_columns
from meshops.mesh.assembly import assemble, edge_table

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _raw(faces, triangulated=False, **kwargs) -> RawKernelOutput:
    """Raw output over the unit square plus an apex, in (3, N) layout."""
    xyz = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.5, 0.5, 1.0],
    ])
    return RawKernelOutput(
        vertices=kwargs.pop("vertices", xyz.T.copy()),
        faces=faces,
        edges=edge_columns(xyz, faces),
        triangulated=triangulated,
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


class TestAssemble:
    def test_layout_is_transposed(self):
        mesh = assemble(_raw([[0, 1, 2], [0, 2, 3]]))
        assert mesh.vertices.shape == (5, 3)
        np.testing.assert_array_equal(mesh.vertices[1], [1.0, 0.0, 0.0])
        assert mesh.vertices.flags["C_CONTIGUOUS"]

    def test_homogeneous_faces_are_a_matrix(self):
        mesh = assemble(_raw([[0, 1, 2], [0, 2, 3]]))
        assert isinstance(mesh.faces, np.ndarray)
        assert mesh.faces.shape == (2, 3)
        assert mesh.render_class is RenderClass.TRIANGLE

    def test_mixed_faces_stay_a_list(self):
        mesh = assemble(_raw([[0, 1, 2, 3], [0, 1, 4]]))
        assert isinstance(mesh.faces, list)
        assert mesh.face_list() == [[0, 1, 2, 3], [0, 1, 4]]
        assert mesh.render_class is RenderClass.MIXED_TRI_QUAD

    def test_given_render_class_is_kept(self):
        mesh = assemble(_raw([[0, 1, 2, 3]]), render_class=RenderClass.QUAD)
        assert mesh.render_class is RenderClass.QUAD

    def test_triangulated_is_triangle(self):
        raw = _raw(
            [[0, 1, 2], [0, 2, 3]],
            triangulated=True,
            edges0=edge_columns(np.eye(3), [[0, 1, 2]]),
            normals0=np.zeros((3, 5)),
        )
        mesh = assemble(raw, render_class=RenderClass.QUAD)
        assert mesh.render_class is RenderClass.TRIANGLE
        assert len(mesh.edges0) == 3
        assert mesh.normals0.shape == (5, 3)

    def test_normals_are_transposed(self):
        normals = np.zeros((3, 5))
        normals[2] = 1.0
        mesh = assemble(_raw([[0, 1, 2]], normals=normals))
        assert mesh.normals.shape == (5, 3)
        np.testing.assert_array_equal(mesh.normals[:, 2], 1.0)

    def test_exact_rational(self):
        exact = np.empty((3, 5), dtype=object)
        exact[:] = [[Fraction(k, 3) for k in range(5)] for _ in range(3)]
        mesh = assemble(_raw([[0, 1, 2]], vertices=exact), numeric_policy="exact_rational")
        assert mesh.exact_vertices.shape == (5, 3)
        assert mesh.exact_vertices[4, 1] == Fraction(4, 3)
        assert mesh.vertices.dtype == np.float64
        assert mesh.vertices[1, 0] == 1.0 / 3.0

    def test_advisories_are_copied(self):
        notes = ["note"]
        mesh = assemble(_raw([[0, 1, 2]]), advisories=notes)
        notes.append("later")
        assert mesh.advisories == ["note"]


class TestEdgeTable:
    def test_columns(self):
        table = edge_table(edge_columns(np.eye(3), [[0, 1, 2]]))
        assert len(table) == 3
        assert table.pairs.tolist() == [[0, 1], [0, 2], [1, 2]]
        np.testing.assert_allclose(table.length, np.sqrt(2.0))
        assert table.boundary.all()
        assert not table.non_manifold.any()

    def test_empty_pairs_shape(self):
        empty = {k: np.zeros(0) for k in ("i1", "i2", "length", "angle", "face_count")}
        assert edge_table(empty).pairs.shape == (0, 2)
