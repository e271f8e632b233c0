"""Mesh Builder / Orchestrator.

Both public entry points run the same sequence: validate, downgrade a
redundant `triangulate`, select the kernel by numeric policy, invoke it
once, assemble. They differ only in the kernel call (one mesh or one
output per connected component) and in how many assemblies follow.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from meshops.core.contracts import BuildOptions
from meshops.core.errors import KernelError, MeshValidationError
from meshops.core.pipeline_base import BasePipeline
from meshops.kernel import KernelOptions, SurfaceKernel, select_kernel
from .assembly import assemble
from .data import CanonicalMesh, ProcessedMesh
from .render import RenderMesh
from .validation import validate

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT")

TRIANGULATE_ADVISORY = "Ignored option `triangulate`, since the mesh is already triangulated."


class _KernelPipeline(BasePipeline[OutputT]):
    def validate_inputs(self, vertices: Any, faces: Any) -> CanonicalMesh:
        return validate(
            vertices,
            faces,
            numeric_policy=self.options.numeric_policy,
            index_origin=self.options.index_origin,
        )

    def run(self, mesh: CanonicalMesh) -> OutputT:
        advisories: list[str] = []
        triangulate = self.options.triangulate
        if triangulate and mesh.is_triangle_mesh:
            logger.info(TRIANGULATE_ADVISORY)
            advisories.append(TRIANGULATE_ADVISORY)
            triangulate = False

        kernel = select_kernel(self.options.numeric_policy)
        kernel_options = KernelOptions(
            is_triangle=mesh.is_triangle_mesh,
            triangulate=triangulate,
            clean=self.options.clean,
            normals=self.options.normals,
        )
        try:
            raw = self.invoke(kernel, mesh, kernel_options)
        except KernelError:
            raise
        except (ArithmeticError, ValueError, IndexError) as e:
            raise KernelError(f"Kernel '{kernel.name}' failed: {e}") from e
        return self.assemble_output(raw, mesh, advisories)

    @abstractmethod
    def invoke(self, kernel: SurfaceKernel, mesh: CanonicalMesh, options: KernelOptions) -> Any:
        ...

    @abstractmethod
    def assemble_output(self, raw: Any, mesh: CanonicalMesh, advisories: list[str]) -> OutputT:
        ...


class BuildMeshPipeline(_KernelPipeline[ProcessedMesh]):
    name: ClassVar[str] = "build_mesh"

    def invoke(self, kernel, mesh, options):
        return kernel.invoke(mesh, options)

    def assemble_output(self, raw, mesh, advisories):
        # Cleaning can shrink faces, so the validated class only holds without it
        return assemble(
            raw,
            numeric_policy=self.options.numeric_policy,
            render_class=None if self.options.clean else mesh.render_class,
            advisories=advisories,
        )


class ConnectedComponentsPipeline(_KernelPipeline[list[ProcessedMesh]]):
    name: ClassVar[str] = "connected_components"

    def invoke(self, kernel, mesh, options):
        return kernel.connected_components(mesh, options)

    def assemble_output(self, raw, mesh, advisories):
        # Each component is classified from its own faces
        return [
            assemble(raw_cc, numeric_policy=self.options.numeric_policy, advisories=advisories)
            for raw_cc in raw
        ]


def resolve_options(options: BuildOptions | None = None, **overrides: Any) -> BuildOptions:
    """Apply keyword overrides on top of `options` (or the defaults)."""
    unknown = set(overrides) - set(BuildOptions.model_fields)
    if unknown:
        raise TypeError(f"Unexpected option(s): {', '.join(sorted(unknown))}")
    base = options.model_dump() if options is not None else {}
    return BuildOptions(**{**base, **overrides})


def _external_vertices_faces(mesh: Any, numeric_policy: str) -> tuple[Any, Any]:
    """Extract (vertices, faces) from a mapping, a mesh-like object or a RenderMesh."""
    if isinstance(mesh, RenderMesh):
        return mesh.to_vertices_faces()

    if isinstance(mesh, Mapping):
        get = mesh.get
    elif hasattr(mesh, "vertices") and hasattr(mesh, "faces"):
        def get(key, default=None):
            return getattr(mesh, key, default)
    else:
        raise MeshValidationError(
            "The `mesh` argument must provide `vertices` and `faces` "
            "(a mapping, a mesh object or a RenderMesh)."
        )

    vertices, faces = get("vertices"), get("faces")
    if vertices is None or faces is None:
        raise MeshValidationError("The `mesh` argument must provide `vertices` and `faces`.")
    if numeric_policy == "exact_rational" and get("exact_vertices") is not None:
        vertices = get("exact_vertices")
    return vertices, faces


def _inputs(vertices: Any, faces: Any, mesh: Any, options: BuildOptions) -> tuple[Any, Any]:
    if mesh is not None:
        return _external_vertices_faces(mesh, options.numeric_policy)
    if vertices is None or faces is None:
        raise MeshValidationError("`vertices` and `faces` are required unless `mesh` is given.")
    return vertices, faces


def build_mesh(
    vertices: Any = None,
    faces: Any = None,
    *,
    mesh: Any = None,
    options: BuildOptions | None = None,
    **overrides: Any,
) -> ProcessedMesh:
    """Make a mesh with coherently oriented faces.

    Normals are computed and faces triangulated when requested.

    Args:
        vertices: (N, 3) coordinates; `Fraction` entries under 'exact_rational'.
        faces: 2-D integer array or list of index sequences.
        mesh: If given, takes precedence over `vertices` and `faces`: a
            mapping or object with `vertices`/`faces` (e.g. a
            `trimesh.Trimesh` or a `ProcessedMesh`), or a `RenderMesh`.
        options: Base `BuildOptions`.
        **overrides: triangulate, clean, normals, numeric_policy, index_origin.

    Returns:
        ProcessedMesh. When triangulation ran, `edges0` and `normals0` keep
        the edges and normals from before it.

    Raises:
        MeshValidationError: malformed input; nothing is computed.
        KernelError: the kernel could not process the mesh.
    """
    opts = resolve_options(options, **overrides)
    vertices, faces = _inputs(vertices, faces, mesh, opts)
    return BuildMeshPipeline(opts).execute(vertices, faces)


def build_mesh_from_external(mesh: Any, **kwargs: Any) -> ProcessedMesh:
    """`build_mesh` on an externally supplied mesh value."""
    return build_mesh(mesh=mesh, **kwargs)


def split_connected_components(
    vertices: Any = None,
    faces: Any = None,
    *,
    mesh: Any = None,
    options: BuildOptions | None = None,
    **overrides: Any,
) -> list[ProcessedMesh]:
    """Compute the connected components of a mesh.

    Each component is processed like `build_mesh` does (orientation,
    optional cleaning, triangulation and normals) and re-indexed densely.

    Returns:
        One ProcessedMesh per component, ordered by their first input face.
    """
    opts = resolve_options(options, **overrides)
    vertices, faces = _inputs(vertices, faces, mesh, opts)
    return ConnectedComponentsPipeline(opts).execute(vertices, faces)
