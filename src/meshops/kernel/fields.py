"""Number fields: the scalar type each kernel variant computes with.

Predicates (orientation, signed volume, equality) are evaluated on the
internal scalars, so the exact fields never round. Measurements such as
lengths, angles and normals are always computed on float approximations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from fractions import Fraction
from typing import ClassVar

import numpy as np

Point = tuple


class NumberField(ABC):
    name: ClassVar[str] = ""
    exact: ClassVar[bool] = False

    @abstractmethod
    def to_internal(self, vertices: np.ndarray) -> list[Point]:
        """Convert validated (N, 3) coordinates into internal points."""
        ...

    def to_output(self, points: list[Point]) -> np.ndarray:
        """Coordinates in the kernel's native (3, N) layout."""
        return self.to_float(points).T.copy()

    def to_float(self, points: list[Point]) -> np.ndarray:
        return np.array(points, dtype=np.float64).reshape(-1, 3)


class FloatField(NumberField):
    name: ClassVar[str] = "double"

    def to_internal(self, vertices: np.ndarray) -> list[Point]:
        return [tuple(row) for row in np.asarray(vertices, dtype=np.float64).tolist()]


class LazyExactField(NumberField):
    """Double input, exact predicates: each double is converted to the Fraction it denotes."""

    name: ClassVar[str] = "lazy_exact"
    exact: ClassVar[bool] = True

    def to_internal(self, vertices: np.ndarray) -> list[Point]:
        rows = np.asarray(vertices, dtype=np.float64).tolist()
        return [tuple(Fraction(x) for x in row) for row in rows]


class RationalField(NumberField):
    """Fraction input and output."""

    name: ClassVar[str] = "rational"
    exact: ClassVar[bool] = True

    def to_internal(self, vertices: np.ndarray) -> list[Point]:
        return [tuple(Fraction(x) for x in row) for row in vertices.tolist()]

    def to_output(self, points: list[Point]) -> np.ndarray:
        out = np.empty((3, len(points)), dtype=object)
        for j, point in enumerate(points):
            out[:, j] = point
        return out
