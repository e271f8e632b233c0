"""Reference geometry kernel and numeric-policy dispatch."""

from .fields import FloatField, LazyExactField, NumberField, RationalField
from .surface import KernelOptions, RawKernelOutput, SurfaceKernel

_KERNELS: dict[str, SurfaceKernel] = {
    "approximate": SurfaceKernel(FloatField()),
    "exact_symbolic": SurfaceKernel(LazyExactField()),
    "exact_rational": SurfaceKernel(RationalField()),
}


def select_kernel(numeric_policy: str) -> SurfaceKernel:
    """Return the kernel variant for a numeric policy tag."""
    try:
        return _KERNELS[numeric_policy]
    except KeyError:
        raise ValueError(
            f"Unknown numeric policy {numeric_policy!r}; expected one of {sorted(_KERNELS)}"
        ) from None


__all__ = [
    "FloatField",
    "KernelOptions",
    "LazyExactField",
    "NumberField",
    "RationalField",
    "RawKernelOutput",
    "SurfaceKernel",
    "select_kernel",
]
