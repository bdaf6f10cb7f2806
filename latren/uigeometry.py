"""Rectangles, transforms and projection used to lay out UI canvases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BASE_WND_WIDTH = 1280
BASE_WND_HEIGHT = 720

Vec2 = tuple[float, float]
Mat4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen units, ``y`` growing upwards."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0

    def __add__(self, offset: Vec2) -> Rect:
        dx, dy = offset
        return Rect(self.left + dx, self.right + dx, self.top + dy, self.bottom + dy)

    def __sub__(self, offset: Vec2) -> Rect:
        dx, dy = offset
        return Rect(self.left - dx, self.right - dx, self.top - dy, self.bottom - dy)

    def origin(self) -> Vec2:
        """The bottom-left corner."""
        return (self.left, self.bottom)


@dataclass(frozen=True)
class UITransform:
    pos: Vec2 = (0.0, 0.0)
    size: float = 1.0


class CanvasBackgroundVerticalAnchor(Enum):
    """Whether a canvas background extends above or below its offset."""

    OVER = "over"
    UNDER = "under"


def clip_bounds(
    bounds: Rect,
    parent_offset: Vec2,
    background_size: Vec2,
    anchor: CanvasBackgroundVerticalAnchor,
    overflow: bool,
) -> Rect:
    """Move local ``bounds`` into a parent canvas and limit them to its background.

    With ``overflow`` the bounds are only moved.  Otherwise the top and
    bottom are clamped to the background; the left edge takes the smaller
    of itself and the canvas origin and the right edge the larger of itself
    and the background's right side.
    """
    moved = bounds + parent_offset
    if overflow:
        return moved
    width, height = background_size
    off_x, off_y = parent_offset
    bottom = 0.0 if anchor is CanvasBackgroundVerticalAnchor.OVER else -height
    return Rect(
        left=min(moved.left, off_x),
        right=max(moved.right, off_x + width),
        top=min(moved.top, off_y + bottom + height),
        bottom=max(moved.bottom, off_y + bottom),
    )


def canvas_projection(offset: Vec2) -> Mat4:
    """Orthographic projection of the base window shifted by ``offset``.

    The matrix is given row by row and maps ``(x, y, z, 1)`` column vectors.
    """
    x, y = offset
    left, right = -x, BASE_WND_WIDTH - x
    bottom, top = -y, BASE_WND_HEIGHT - y
    return (
        (2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left)),
        (0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom)),
        (0.0, 0.0, -1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def container_local_bounds(position: Vec2, offset: Vec2, background_size: Vec2) -> Rect:
    """Bounds of a container whose background hangs down from its position."""
    x = position[0] + offset[0]
    y = position[1] + offset[1]
    return Rect(
        left=x,
        right=x + background_size[0],
        top=y,
        bottom=y - background_size[1],
    )