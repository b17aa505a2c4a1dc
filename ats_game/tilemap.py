"""A square tile map anchored at its centre."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Tile:
    """One tile of the map."""

    x: int
    y: int
    texture_index: int = 0


class TileMap:
    """A grid of tiles whose centre sits at the world origin."""

    def __init__(
        self,
        width: int = 64,
        height: int = 64,
        tile_width: float = 16.0,
        tile_height: float = 16.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("map size must be positive")
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError("tile size must be positive")
        self.width = width
        self.height = height
        self.tile_width = tile_width
        self.tile_height = tile_height
        self._tiles = [[Tile(x, y) for y in range(height)] for x in range(width)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} map")

    def tile_at(self, x: int, y: int) -> Tile:
        self._check(x, y)
        return self._tiles[x][y]

    def tile_world_position(self, x: int, y: int) -> Tuple[float, float]:
        """World coordinates of the centre of tile (x, y)."""
        self._check(x, y)
        return (
            (x + 0.5) * self.tile_width - self.width * self.tile_width / 2,
            (y + 0.5) * self.tile_height - self.height * self.tile_height / 2,
        )

    def tiles(self) -> Iterator[Tile]:
        for column in self._tiles:
            yield from column

    def __len__(self) -> int:
        return self.width * self.height