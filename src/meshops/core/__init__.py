"""meshops core: options, errors, logging, pipeline base class."""

from .contracts import NUMERIC_POLICIES, BuildOptions, NumericPolicy, RenderClass
from .errors import KernelError, MeshError, MeshValidationError, UnsupportedConversionError
from .logging import setup_logging
from .options import load_build_options, load_mesh_file
from .pipeline_base import BasePipeline

__all__ = [
    "BasePipeline",
    "BuildOptions",
    "KernelError",
    "MeshError",
    "MeshValidationError",
    "NUMERIC_POLICIES",
    "NumericPolicy",
    "RenderClass",
    "UnsupportedConversionError",
    "load_build_options",
    "load_mesh_file",
    "setup_logging",
]
