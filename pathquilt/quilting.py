"""Image quilting driver: row-major tile placement with path-cut seams."""

import logging
import multiprocessing
from contextlib import nullcontext
from typing import Optional, Tuple

import numpy as np
from tqdm import tqdm

from .compositor import paint_tile, seam_pixels
from .errors import ConfigurationError
from .overlap import overlap_cost
from .params import QuiltingParams
from .sampler import CandidatePatch, CandidateSampler
from .seam import horizontal_seam, vertical_seam
from .tiling import TileGrid, TilePosition

logger = logging.getLogger(__name__)


class ImageQuilting:
    """Implements Image Quilting texture synthesis with minimum-cost seams."""

    def __init__(self, params: Optional[QuiltingParams] = None, **kwargs):
        """Initializes the synthesizer.

        Args:
            params: Tiling parameters. Keyword arguments build a
                QuiltingParams when omitted.
        """
        self.params = (params if params is not None else QuiltingParams(**kwargs)).validate()
        self.rng = np.random.default_rng(self.params.seed)
        self.sampler = CandidateSampler(
            tile_size=self.params.tile_size,
            overlap=self.params.overlap,
            candidate_budget=self.params.candidate_budget,
            pool_size=self.params.selection_pool_size,
            rng=self.rng,
        )

    @property
    def tile_size(self) -> int:
        return self.params.tile_size

    @property
    def overlap(self) -> int:
        return self.params.overlap

    def _check_inputs(self, input_texture: np.ndarray, output_size: Tuple[int, int]) -> None:
        if input_texture.ndim != 3 or input_texture.shape[2] != 3:
            raise ConfigurationError(
                f"Exemplar must be an (H, W, 3) array, got shape {input_texture.shape}."
            )
        output_height, output_width = output_size
        if output_height <= 0 or output_width <= 0:
            raise ConfigurationError(f"Output size must be positive, got {output_size}.")
        self.sampler.check_exemplar(input_texture)

    def synthesize_texture(self, input_texture: np.ndarray, output_size: Tuple[int, int],
                           return_seam_map: bool = False, progress: bool = True):
        """Synthesizes a new texture from `input_texture`.

        Args:
            input_texture: Exemplar (H, W, 3).
            output_size: (height, width) of the output.
            return_seam_map: Also return a boolean map of the seam pixels.
            progress: Show a progress bar over tile rows.

        Returns:
            The output canvas, or (canvas, seam_map) when `return_seam_map`.

        Raises:
            ConfigurationError: Invalid exemplar or output size.
            ExemplarTooSmallError: The exemplar cannot hold a full tile.
        """
        self._check_inputs(input_texture, output_size)
        output_height, output_width = output_size
        grid = TileGrid(output_height, output_width, self.tile_size, self.overlap)

        output_texture = np.zeros((output_height, output_width, 3), dtype=input_texture.dtype)
        seam_map = np.zeros((output_height, output_width), dtype=bool) if return_seam_map else None

        logger.info("Synthesizing %d x %d tiles (tile: %dpx, overlap: %dpx) into %dx%d",
                    grid.rows, grid.cols, self.tile_size, self.overlap, output_width, output_height)

        workers = self.params.workers
        pool_ctx = multiprocessing.Pool(workers) if workers > 1 else nullcontext()
        with pool_ctx as pool:
            # Raster scan order: left and top neighbours are always final
            for row in tqdm(range(grid.rows), desc="Quilting rows", disable=not progress):
                for position in grid.row_positions(row):
                    self._place_tile(input_texture, output_texture, position, grid, pool, seam_map)

        logger.info("Synthesis finished")
        if return_seam_map:
            return output_texture, seam_map
        return output_texture

    def _place_tile(self, input_texture: np.ndarray, output_texture: np.ndarray,
                    position: TilePosition, grid: TileGrid, pool,
                    seam_map: Optional[np.ndarray]) -> CandidatePatch:
        patch = self.sampler.select(input_texture, output_texture, position, grid, pool=pool)
        vertical, horizontal = self._find_seams(input_texture, output_texture, position, grid, patch)
        paint_tile(output_texture, input_texture, position, grid, patch, vertical, horizontal)

        if seam_map is not None:
            y, x = position.origin(grid)
            tile_h, tile_w = position.footprint(grid)
            seam_map[y:y + tile_h, x:x + tile_w] |= seam_pixels(tile_h, tile_w, vertical, horizontal)
        return patch

    def _find_seams(self, input_texture: np.ndarray, output_texture: np.ndarray,
                    position: TilePosition, grid: TileGrid, patch: CandidatePatch):
        """Computes the vertical and horizontal seam paths of a tile (None where no neighbour)."""
        y, x = position.origin(grid)
        tile_h, tile_w = position.footprint(grid)
        left = position.left_overlap(grid)
        top = position.top_overlap(grid)
        source = input_texture[patch.sy:patch.sy + tile_h, patch.sx:patch.sx + tile_w]

        vertical = horizontal = None
        if left > 0:
            field, _ = overlap_cost(output_texture[y:y + tile_h, x:x + left], source[:, :left])
            vertical = vertical_seam(field)
        if top > 0:
            field, _ = overlap_cost(output_texture[y:y + top, x:x + tile_w], source[:top, :])
            horizontal = horizontal_seam(field)
        return vertical, horizontal


def synthesize(input_texture: np.ndarray, output_width: int, output_height: int,
               tile_size: int, overlap: int, candidate_budget: int,
               selection_pool_size: int, seed: Optional[int] = None, workers: int = 1,
               return_seam_map: bool = False, progress: bool = False):
    """Quilts `input_texture` into an output of `output_width` x `output_height`.

    Every parameter is validated before any pixel is painted; a
    ConfigurationError aborts the whole call.
    """
    params = QuiltingParams(
        tile_size=tile_size,
        overlap=overlap,
        candidate_budget=candidate_budget,
        selection_pool_size=selection_pool_size,
        seed=seed,
        workers=workers,
    )
    quilter = ImageQuilting(params)
    return quilter.synthesize_texture(input_texture, (output_height, output_width),
                                      return_seam_map=return_seam_map, progress=progress)
