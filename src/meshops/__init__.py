"""meshops: mesh validation, orientation repair and connected components.

Modules:
- core: options, errors, logging, pipeline base class
- mesh: validator, builder, assembler, render conversion
- kernel: reference geometry kernel (three numeric policies)
"""

__version__ = "0.1.0"

from .core.contracts import BuildOptions, RenderClass
from .core.errors import (
    KernelError,
    MeshError,
    MeshValidationError,
    UnsupportedConversionError,
)
from .mesh.builder import build_mesh, build_mesh_from_external, split_connected_components
from .mesh.data import CanonicalMesh, EdgeTable, ProcessedMesh
from .mesh.plotting import edges_scene
from .mesh.render import RenderMesh, to_renderable
from .mesh.validation import validate

__all__ = [
    "BuildOptions",
    "CanonicalMesh",
    "EdgeTable",
    "KernelError",
    "MeshError",
    "MeshValidationError",
    "ProcessedMesh",
    "RenderClass",
    "RenderMesh",
    "UnsupportedConversionError",
    "build_mesh",
    "build_mesh_from_external",
    "edges_scene",
    "split_connected_components",
    "to_renderable",
    "validate",
]
