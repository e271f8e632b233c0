"""Common Pydantic models and enums shared across the mesh pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

NumericPolicy = Literal["approximate", "exact_symbolic", "exact_rational"]

NUMERIC_POLICIES: tuple[str, ...] = ("approximate", "exact_symbolic", "exact_rational")


class RenderClass(str, Enum):
    """How a mesh's faces can be handed to a triangle/quad renderer."""

    NONE = "none"
    TRIANGLE = "triangle"
    QUAD = "quad"
    MIXED_TRI_QUAD = "mixed_tri_quad"


class BuildOptions(BaseModel):
    """Options of a mesh build or a connected-components split."""

    triangulate: bool = Field(False, description="Triangulate the faces")
    clean: bool = Field(
        False,
        description="Merge duplicated vertices and faces, remove isolated vertices",
    )
    normals: bool = Field(False, description="Compute per-vertex normals")
    numeric_policy: NumericPolicy = Field(
        "approximate",
        description=(
            "Number type used by the kernel: 'approximate' (double), "
            "'exact_symbolic' (exact predicates on double input) or "
            "'exact_rational' (Fraction coordinates in and out)"
        ),
    )
    index_origin: int = Field(
        0, ge=0, le=1, description="Index of the first vertex in `faces` (0 or 1)"
    )
