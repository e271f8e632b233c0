"""Base class for mesh pipelines.

A pipeline validates raw input into a canonical mesh, then runs on it.
Subclasses decide what running means (one kernel call, one assembly per
kernel output); the base class owns the logging and timing around it.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from .contracts import BuildOptions

if TYPE_CHECKING:
    from meshops.mesh.data import CanonicalMesh

OutputT = TypeVar("OutputT")

logger = logging.getLogger(__name__)


class BasePipeline(ABC, Generic[OutputT]):
    """Abstract base for mesh pipelines.

    Subclasses must:
    1. Set the class variable `name`
    2. Implement validate_inputs() and run()

    Example:
        class BuildMeshPipeline(BasePipeline[ProcessedMesh]):
            name = "build_mesh"

            def validate_inputs(self, vertices, faces) -> CanonicalMesh: ...
            def run(self, mesh: CanonicalMesh) -> ProcessedMesh: ...
    """

    name: ClassVar[str] = ""

    def __init__(self, options: BuildOptions):
        self.options = options

    @abstractmethod
    def validate_inputs(self, vertices: Any, faces: Any) -> CanonicalMesh:
        """Turn raw input into a canonical mesh, raising on malformed data."""
        ...

    @abstractmethod
    def run(self, mesh: CanonicalMesh) -> OutputT:
        """Execute this pipeline on a validated mesh."""
        ...

    def execute(self, vertices: Any, faces: Any) -> OutputT:
        """Validate, then run with logging and timing."""
        pipeline_name = self.name or self.__class__.__name__
        logger.info(f"[{pipeline_name}] Validating inputs...")
        mesh = self.validate_inputs(vertices, faces)

        logger.info(
            f"[{pipeline_name}] Starting ({mesh.n_vertices} vertices, {len(mesh.faces)} faces, "
            f"policy={self.options.numeric_policy})..."
        )
        t0 = time.time()
        result = self.run(mesh)
        elapsed = time.time() - t0
        logger.info(f"[{pipeline_name}] Done in {elapsed:.3f}s")
        return result
