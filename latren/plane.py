"""A tiled, optionally jittered terrain plane with per-vertex normals."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field


@dataclass
class Plane:
    """A unit plane split into ``tiling`` tiles, centred on the origin.

    ``variation`` jitters interior vertices inside their tiles and
    ``height_variation`` gives every vertex a random height in
    ``[-height_variation / 2, height_variation / 2]``.  Vertices are stored
    as flat ``(z, height, x)`` triples, texture coordinates as ``(u, v)``
    pairs and normals as ``(x, y, z)`` triples.
    """

    tiling: tuple[int, int] = (1, 1)
    variation: float = 0.0
    height_variation: float = 0.0
    seed: int | None = None
    vertices: list[float] = field(default_factory=list, init=False)
    normals: list[float] = field(default_factory=list, init=False)
    tex_coords: list[float] = field(default_factory=list, init=False)
    indices: list[int] = field(default_factory=list, init=False)
    height_grid: list[list[float]] = field(default_factory=list, init=False)
    _rng: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def generate_vertices(self) -> None:
        """Rebuild vertices, texture coordinates, indices, heights and normals."""
        tiles_x, tiles_y = self.tiling
        if tiles_x <= 0 or tiles_y <= 0:
            return
        self.vertices.clear()
        self.normals.clear()
        self.tex_coords.clear()
        self.indices.clear()

        tile_w = 1.0 / tiles_x
        tile_h = 1.0 / tiles_y
        rand = self._rng.random

        grid: list[list[float]] = []
        for y in range(tiles_y + 1):
            row: list[float] = []
            for x in range(tiles_x + 1):
                jitter_x = jitter_y = 0.0
                if self.variation > 0:
                    if 0 < y < tiles_y:
                        jitter_x = (rand() - 0.5) * self.variation
                    if 0 < x < tiles_x:
                        jitter_y = (rand() - 0.5) * self.variation
                pos_x = x * tile_w - 0.5 + jitter_x * tile_w
                pos_y = y * tile_h - 0.5 + jitter_y * tile_h
                height = (rand() - 0.5) * self.height_variation
                row.append(height)
                self.vertices.extend((pos_y, height, pos_x))
                self.tex_coords.extend((x + jitter_x * tile_w, y + jitter_y * tile_h))
            grid.append(row)
        self.height_grid = grid

        stride = tiles_x + 1
        for y in range(tiles_y):
            for x in range(tiles_x):
                top_left = x + y * stride
                top_right = top_left + 1
                bottom_left = x + (y + 1) * stride
                bottom_right = bottom_left + 1
                self.indices.extend((top_left, top_right, bottom_left))
                self.indices.extend((top_right, bottom_right, bottom_left))

        self.normals.extend(self._compute_normals())

    def _compute_normals(self) -> list[float]:
        grid = self.height_grid
        rows = len(grid)

        def height(y: int, x: int) -> float:
            if 0 <= y < rows and 0 <= x < len(grid[y]):
                return grid[y][x]
            return 0.0

        normals: list[float] = []
        for y, row in enumerate(grid):
            for x in range(len(row)):
                hn, hs = height(y - 1, x), height(y + 1, x)
                hw, he = height(y, x - 1), height(y, x + 1)
                hnw, hne = height(y - 1, x - 1), height(y - 1, x + 1)
                hsw, hse = height(y + 1, x - 1), height(y + 1, x + 1)
                dydx = (hne + 2 * he + hse) - (hnw + 2 * hw + hsw)
                dydz = (hsw + 2 * hs + hse) - (hnw + 2 * hn + hne)
                length = math.sqrt(dydx * dydx + 1.0 + dydz * dydz)
                normals.extend((-dydx / length, 1.0 / length, -dydz / length))
        return normals

    def height_map(self) -> list[float]:
        """Heights laid out row by row for a heightfield collider.

        Each entry at ``(x, y)`` reads the height grid at ``[x][y]``, so a
        plane whose tiling is not square raises ``IndexError``.
        """
        width = self.tiling[0] + 1
        depth = self.tiling[1] + 1
        return [self.height_grid[x][y] for y in range(depth) for x in range(width)]

    @property
    def height_bounds(self) -> tuple[float, float]:
        """Minimum and maximum height given to the collider."""
        return (-0.5 * self.variation, 0.5 * self.variation)

    @property
    def collider_scaling(self) -> tuple[float, float, float]:
        """Local scaling that fits the heightfield into the unit plane."""
        return (1.0 / self.tiling[0], 1.0, 1.0 / self.tiling[1])