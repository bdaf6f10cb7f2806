"""Camera state, view-frustum planes and axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]
Mat4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

IDENTITY4: Mat4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box given by its centre and half-extents."""

    center: Vec3 = (0.0, 0.0, 0.0)
    extents: Vec3 = (0.5, 0.5, 0.5)

    @classmethod
    def from_min_max(cls, minimum: Vec3, maximum: Vec3) -> AABB:
        center = tuple((hi + lo) * 0.5 for lo, hi in zip(minimum, maximum))
        extents = tuple(hi - c for hi, c in zip(maximum, center))
        return cls(center, extents)  # type: ignore[arg-type]

    def min_corner(self) -> Vec3:
        return tuple(c - e for c, e in zip(self.center, self.extents))  # type: ignore[return-value]

    def max_corner(self) -> Vec3:
        return tuple(c + e for c, e in zip(self.center, self.extents))  # type: ignore[return-value]


@dataclass(frozen=True)
class FrustumPlane:
    """A plane with a unit normal and its signed distance from the origin."""

    normal: Vec3 = (0.0, 1.0, 0.0)
    dist: float = 0.0

    @classmethod
    def from_point_normal(cls, point: Vec3, normal: Vec3) -> FrustumPlane:
        """The plane through ``point`` facing ``normal``; the normal is normalized."""
        length = math.sqrt(sum(c * c for c in normal))
        if length == 0:
            raise ValueError("plane normal must not be the zero vector")
        unit = tuple(c / length for c in normal)
        dist = sum(n * p for n, p in zip(unit, point))
        return cls(unit, dist)  # type: ignore[arg-type]


@dataclass
class ViewFrustum:
    """The six planes bounding what a camera sees."""

    top: FrustumPlane = field(default_factory=FrustumPlane)
    bottom: FrustumPlane = field(default_factory=FrustumPlane)
    left: FrustumPlane = field(default_factory=FrustumPlane)
    right: FrustumPlane = field(default_factory=FrustumPlane)
    near_clipping_plane: FrustumPlane = field(default_factory=FrustumPlane)
    far_clipping_plane: FrustumPlane = field(default_factory=FrustumPlane)


@dataclass
class Camera:
    """Perspective camera state; angles are in degrees."""

    frustum: ViewFrustum = field(default_factory=ViewFrustum)
    fov: float = 60.0
    clipping_far: float = 1000.0
    clipping_near: float = 0.1
    aspect_ratio: float = 0.0
    front: Vec3 = (0.0, 0.0, 1.0)
    right: Vec3 = (1.0, 0.0, 0.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    pos: Vec3 = (0.0, 0.0, 0.0)
    projection_matrix: Mat4 = IDENTITY4
    view_matrix: Mat4 = IDENTITY4