"""Geometry of the output tile grid."""

from dataclasses import dataclass
from typing import Iterator


def _ceildiv(a: int, b: int) -> int:
    return -(a // -b)


@dataclass(frozen=True)
class TileGrid:
    """Row-major grid of tile origins covering an output canvas.

    Consecutive tile origins are `step = tile_size - overlap` pixels apart,
    so neighbouring tiles share a strip exactly `overlap` pixels wide. Tiles
    in the last row and column are clipped to the canvas.
    """

    output_height: int
    output_width: int
    tile_size: int
    overlap: int

    @property
    def step(self) -> int:
        return self.tile_size - self.overlap

    @property
    def rows(self) -> int:
        return _ceildiv(self.output_height, self.step)

    @property
    def cols(self) -> int:
        return _ceildiv(self.output_width, self.step)

    def __len__(self) -> int:
        return self.rows * self.cols

    def __iter__(self) -> Iterator["TilePosition"]:
        for row in range(self.rows):
            yield from self.row_positions(row)

    def row_positions(self, row: int) -> Iterator["TilePosition"]:
        for col in range(self.cols):
            yield TilePosition(row, col)


@dataclass(frozen=True)
class TilePosition:
    """A cell of the tile grid, addressed as (row, col)."""

    row: int
    col: int

    @property
    def is_first(self) -> bool:
        return self.row == 0 and self.col == 0

    def origin(self, grid: TileGrid):
        """Top-left output pixel (y, x) of the tile."""
        return self.row * grid.step, self.col * grid.step

    def footprint(self, grid: TileGrid):
        """Clipped (height, width) of the tile on the canvas."""
        y, x = self.origin(grid)
        return (min(grid.tile_size, grid.output_height - y),
                min(grid.tile_size, grid.output_width - x))

    def left_overlap(self, grid: TileGrid) -> int:
        """Width of the strip shared with the left neighbour (0 in the first column)."""
        if self.col == 0:
            return 0
        return min(grid.overlap, self.footprint(grid)[1])

    def top_overlap(self, grid: TileGrid) -> int:
        """Height of the strip shared with the top neighbour (0 in the first row)."""
        if self.row == 0:
            return 0
        return min(grid.overlap, self.footprint(grid)[0])
