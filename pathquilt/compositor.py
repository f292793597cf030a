"""Pastes a chosen exemplar patch into the output canvas along its seams."""

from typing import Optional

import numpy as np

from .sampler import CandidatePatch
from .seam import seam_mask
from .tiling import TileGrid, TilePosition


def new_pixel_mask(tile_h: int, tile_w: int, left: int = 0, top: int = 0,
                   vertical: Optional[np.ndarray] = None,
                   horizontal: Optional[np.ndarray] = None) -> np.ndarray:
    """Decides, per pixel of a tile footprint, whether the new patch wins.

    Args:
        tile_h, tile_w: Clipped footprint of the tile.
        left: Width of the left overlap strip.
        top: Height of the top overlap strip.
        vertical: Seam through the left strip, one column per row.
        horizontal: Seam through the top strip, one row per column.

    Returns:
        Boolean (tile_h, tile_w) mask, True where the new patch is painted.
        In the corner both seams must agree on "new"; otherwise the
        previously placed pixel stays.

    Raises:
        ValueError: A strip has positive thickness but no seam of the
            matching length.
    """
    mask = np.ones((tile_h, tile_w), dtype=bool)
    if left > 0:
        if vertical is None or len(vertical) != tile_h:
            raise ValueError(f"Left overlap of width {left} needs a vertical seam of length {tile_h}")
        mask[:, :left] &= seam_mask(vertical, (tile_h, left), axis=1)
    if top > 0:
        if horizontal is None or len(horizontal) != tile_w:
            raise ValueError(f"Top overlap of height {top} needs a horizontal seam of length {tile_w}")
        mask[:top, :] &= seam_mask(horizontal, (top, tile_w), axis=0)
    return mask


def seam_pixels(tile_h: int, tile_w: int,
                vertical: Optional[np.ndarray] = None,
                horizontal: Optional[np.ndarray] = None) -> np.ndarray:
    """Pixels of a tile footprint the seam paths pass through."""
    cut = np.zeros((tile_h, tile_w), dtype=bool)
    if vertical is not None and len(vertical):
        cut[np.arange(len(vertical)), vertical] = True
    if horizontal is not None and len(horizontal):
        cut[horizontal, np.arange(len(horizontal))] = True
    return cut


def paint_tile(canvas: np.ndarray, exemplar: np.ndarray, position: TilePosition,
               grid: TileGrid, patch: CandidatePatch,
               vertical: Optional[np.ndarray] = None,
               horizontal: Optional[np.ndarray] = None) -> np.ndarray:
    """Writes the new pixels of a tile into `canvas` in place.

    Old pixels are left untouched; there is no blending across the seam.

    Returns:
        The boolean mask of painted pixels, in tile coordinates.
    """
    y, x = position.origin(grid)
    tile_h, tile_w = position.footprint(grid)
    mask = new_pixel_mask(tile_h, tile_w,
                          left=position.left_overlap(grid),
                          top=position.top_overlap(grid),
                          vertical=vertical, horizontal=horizontal)
    source = exemplar[patch.sy:patch.sy + tile_h, patch.sx:patch.sx + tile_w]
    target = canvas[y:y + tile_h, x:x + tile_w]
    target[mask] = source[mask]
    return mask
