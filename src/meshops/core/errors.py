"""Exception taxonomy shared by the validator, the kernel and the render converter."""

from __future__ import annotations


class MeshError(Exception):
    """Base class for every error raised by meshops."""


class MeshValidationError(MeshError, ValueError):
    """Malformed vertices or faces. Raised before any kernel call."""


class KernelError(MeshError, RuntimeError):
    """The geometry kernel could not process the mesh (e.g. unrepairable topology)."""


class UnsupportedConversionError(MeshError, ValueError):
    """The mesh has faces with more than four sides and cannot be rendered as-is."""
