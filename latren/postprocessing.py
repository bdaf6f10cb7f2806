"""Post-processing settings and convolution kernel helpers."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

PI = math.pi
E = math.e
TAU = 2.0 * math.pi
HALF_PI = math.pi / 2.0

_KERNEL_SIZES = (9, 25, 49)


@dataclass
class Vignette:
    is_active: bool = False
    size: float = 0.75
    threshold: float = 0.0


@dataclass
class Kernel:
    is_active: bool = False
    blend: float = 1.0
    offset: float = 1.0 / 300.0
    kernel3x3: list[float] | None = None
    use_kernel3x3: bool = False
    kernel5x5: list[float] | None = None
    use_kernel5x5: bool = False
    kernel7x7: list[float] | None = None
    use_kernel7x7: bool = False
    vignette: Vignette = field(default_factory=Vignette)


@dataclass
class PostProcessing:
    vignette: Vignette = field(default_factory=Vignette)
    vignette_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    kernel: Kernel = field(default_factory=Kernel)
    gamma: float = 1.0
    contrast: float = 1.0
    brightness: float = 1.0
    saturation: float = 1.0

    def apply_kernel(self, kernel: Sequence[float], factor: float = 1.0) -> None:
        """Install a 3x3, 5x5 or 7x7 kernel scaled by ``factor``.

        Kernels of any other size are ignored with a warning.
        """
        values = [v * factor for v in kernel]
        if len(values) == 9:
            self.kernel.kernel3x3 = values
            self.kernel.use_kernel3x3 = True
        elif len(values) == 25:
            self.kernel.kernel5x5 = values
            self.kernel.use_kernel5x5 = True
        elif len(values) == 49:
            self.kernel.kernel7x7 = values
            self.kernel.use_kernel7x7 = True
        else:
            logger.warning("Invalid kernel size!")
            return
        self.kernel.is_active = True


def normalize(kernel: Sequence[float]) -> list[float]:
    """Return ``kernel`` scaled so its entries sum to one."""
    total = math.fsum(kernel)
    return [v / total for v in kernel]


def fill(size: int, value: float) -> list[float]:
    """A ``size`` x ``size`` kernel with every entry ``value``."""
    return [value] * (size * size)


def box_blur(size: int) -> list[float]:
    return fill(size, 1.0 / (size * size))


def gaussian_blur(size: int, sigma: int | None = None) -> list[float]:
    """A normalized Gaussian kernel weighted by distance from the last cell.

    ``sigma`` defaults to ``size``.
    """
    if sigma is None:
        sigma = size
    s = 2.0 * float(sigma * sigma)
    kernel = []
    for y in range(size):
        for x in range(size):
            dist_x = abs(float(x) - (size - 1))
            dist_y = abs(float(y) - (size - 1))
            kernel.append(math.exp(-(dist_x * dist_x + dist_y * dist_y) / s) / math.sqrt(PI * s))
    return normalize(kernel)