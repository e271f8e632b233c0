"""YAML loaders for build options and mesh files."""

from __future__ import annotations

from fractions import Fraction
from pathlib import Path
from typing import Any

import yaml

from .contracts import BuildOptions
from .errors import MeshValidationError


def load_build_options(config_path: Path) -> BuildOptions:
    """Load a YAML options file into `BuildOptions`."""
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return BuildOptions(**raw)


def _to_fraction(value: Any) -> Any:
    # Strings such as "1/3" are the only way to spell a rational in YAML/JSON
    if isinstance(value, str):
        try:
            return Fraction(value)
        except ValueError:
            raise MeshValidationError(f"Invalid rational coordinate: {value!r}") from None
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction(value)
    return value


def load_mesh_file(mesh_path: Path, numeric_policy: str = "approximate") -> tuple[Any, Any]:
    """Read a YAML or JSON mesh file holding `vertices` and `faces`.

    Under the exact-rational policy, string and integer coordinates are
    turned into `Fraction`; floats are left as-is so the validator can
    reject them.

    Returns:
        (vertices, faces) ready for `build_mesh`.
    """
    with open(mesh_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not isinstance(raw, dict) or "vertices" not in raw or "faces" not in raw:
        raise MeshValidationError(
            f"{mesh_path} must contain the fields `vertices` and `faces`."
        )
    vertices = raw["vertices"]
    if numeric_policy == "exact_rational":
        if not isinstance(vertices, list) or not all(isinstance(row, list) for row in vertices):
            raise MeshValidationError(
                f"{mesh_path}: `vertices` must be a list of coordinate rows."
            )
        vertices = [[_to_fraction(x) for x in row] for row in vertices]
    return vertices, raw["faces"]
