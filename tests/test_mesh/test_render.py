"""Tests for the render converter and the trimesh hand-off."""

import numpy as np
import pytest

from meshops.core.errors import UnsupportedConversionError
from meshops.mesh.builder import build_mesh
from meshops.mesh.render import RenderMesh, to_renderable


def _has_trimesh() -> bool:
    try:
        import trimesh
        return True
    except ImportError:
        return False


needs_trimesh = pytest.mark.skipif(not _has_trimesh(), reason="trimesh not installed")


# ── Conversion ──


class TestToRenderable:
    def test_triangles(self, tetrahedron):
        render = to_renderable(build_mesh(*tetrahedron))
        assert render.triangles.shape == (4, 3)
        assert render.quads is None
        assert render.vertices.shape == (4, 3)

    def test_quads(self, cube):
        render = to_renderable(build_mesh(*cube))
        assert render.quads.shape == (6, 4)
        assert render.triangles is None

    def test_mixed(self, pyramid):
        mesh = build_mesh(*pyramid)
        render = to_renderable(mesh)
        assert render.triangles.shape == (4, 3)
        assert render.quads.shape == (1, 4)
        assert len(render.triangles) + len(render.quads) == mesh.n_faces

    def test_polygons_are_rejected(self, prism):
        with pytest.raises(UnsupportedConversionError, match="at most four sides"):
            to_renderable(build_mesh(*prism))

    def test_triangulated_polygons(self, prism):
        render = to_renderable(build_mesh(*prism, triangulate=True))
        assert render.triangles.shape == (16, 3)

    def test_normals_and_extras(self, tetrahedron):
        render = to_renderable(build_mesh(*tetrahedron, normals=True), material="steel")
        assert render.normals.shape == (4, 3)
        assert render.extras == {"material": "steel"}

    def test_not_a_processed_mesh(self, tetrahedron):
        with pytest.raises(TypeError):
            to_renderable({"vertices": tetrahedron[0], "faces": tetrahedron[1]})

    def test_to_vertices_faces(self):
        render = RenderMesh(
            vertices=np.zeros((5, 3)),
            triangles=np.array([[0, 1, 4]]),
            quads=np.array([[0, 1, 2, 3]]),
        )
        vertices, faces = render.to_vertices_faces()
        assert vertices.shape == (5, 3)
        assert faces == [[0, 1, 4], [0, 1, 2, 3]]


# ── trimesh ──


@needs_trimesh
class TestToTrimesh:
    def test_tetrahedron(self, tetrahedron):
        tm = to_renderable(build_mesh(*tetrahedron)).to_trimesh()
        assert len(tm.faces) == 4
        assert tm.is_watertight
        assert tm.volume == pytest.approx(8.0 / 3.0)

    def test_quads_are_split(self, cube):
        tm = to_renderable(build_mesh(*cube)).to_trimesh()
        assert len(tm.vertices) == 8
        assert len(tm.faces) == 12
        assert tm.volume == pytest.approx(8.0)

    def test_mixed(self, pyramid):
        tm = to_renderable(build_mesh(*pyramid)).to_trimesh()
        assert len(tm.faces) == 6
        assert tm.is_watertight

    def test_glb_export(self, tmp_path, cube):
        out = tmp_path / "cube.glb"
        to_renderable(build_mesh(*cube, normals=True)).to_trimesh().export(str(out), file_type="glb")
        assert out.exists()
        assert out.stat().st_size > 0
