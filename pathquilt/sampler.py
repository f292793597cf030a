"""Candidate sampling: picks the exemplar patch that continues the output best."""

import functools
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import ExemplarTooSmallError
from .overlap import masked_cost, overlap_mask
from .tiling import TileGrid, TilePosition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidatePatch:
    """A source origin (sy, sx) in the exemplar and its overlap cost."""

    sy: int
    sx: int
    cost: float = 0.0


# Top-level worker for multiprocessing to score a single candidate origin.
# This must be a top-level function for pickling by multiprocessing.
def _top_level_worker_score_candidate(coord_tuple, exemplar, tile_h, tile_w, old_region, mask):
    sy, sx = coord_tuple
    candidate = exemplar[sy:sy + tile_h, sx:sx + tile_w]
    return masked_cost(old_region, candidate, mask)


class CandidateSampler:
    """Random-but-biased tile selection.

    Draws `candidate_budget` source origins uniformly from the exemplar,
    scores each against the already-painted overlap of the target tile and
    picks uniformly among the `pool_size` cheapest. Picking among near-best
    matches instead of the single best avoids visible repetition.
    """

    def __init__(self, tile_size: int, overlap: int, candidate_budget: int,
                 pool_size: int, rng: Optional[np.random.Generator] = None):
        self.tile_size = tile_size
        self.overlap = overlap
        self.candidate_budget = candidate_budget
        self.pool_size = min(pool_size, candidate_budget)
        self.rng = rng if rng is not None else np.random.default_rng()

    def check_exemplar(self, exemplar: np.ndarray) -> None:
        h_in, w_in = exemplar.shape[:2]
        if h_in < self.tile_size or w_in < self.tile_size:
            raise ExemplarTooSmallError(exemplar.shape, self.tile_size)

    def _random_origin(self, exemplar: np.ndarray):
        h_in, w_in = exemplar.shape[:2]
        sy = int(self.rng.integers(0, h_in - self.tile_size + 1))
        sx = int(self.rng.integers(0, w_in - self.tile_size + 1))
        return sy, sx

    def select(self, exemplar: np.ndarray, canvas: np.ndarray, position: TilePosition,
               grid: TileGrid, pool=None) -> CandidatePatch:
        """Chooses the source patch for `position`.

        The exemplar must already have passed `check_exemplar`; the driver
        checks it once per synthesis run.

        Args:
            exemplar: Input texture (H, W, 3), read only.
            canvas: Output canvas holding the already placed neighbours.
            position: Tile being placed.
            grid: Tile grid of the canvas.
            pool: Optional multiprocessing pool used to score candidates.

        Returns:
            The chosen CandidatePatch.
        """
        left = position.left_overlap(grid)
        top = position.top_overlap(grid)

        # No neighbour yet: any origin is as good as another
        if left == 0 and top == 0:
            sy, sx = self._random_origin(exemplar)
            return CandidatePatch(sy, sx, 0.0)

        h_in, w_in = exemplar.shape[:2]
        tile_h, tile_w = position.footprint(grid)
        y, x = position.origin(grid)
        old_region = canvas[y:y + tile_h, x:x + tile_w]
        mask = overlap_mask(tile_h, tile_w, left, top)

        ys = self.rng.integers(0, h_in - self.tile_size + 1, size=self.candidate_budget)
        xs = self.rng.integers(0, w_in - self.tile_size + 1, size=self.candidate_budget)
        coords = list(zip(ys.tolist(), xs.tolist()))

        # Bind fixed arguments so the map only iterates over coords
        worker = functools.partial(_top_level_worker_score_candidate,
                                   exemplar=exemplar, tile_h=tile_h, tile_w=tile_w,
                                   old_region=old_region, mask=mask)
        if pool is None:
            costs = [worker(coord) for coord in coords]
        else:
            costs = pool.map(worker, coords)
        costs = np.asarray(costs, dtype=np.float64)

        best = np.argsort(costs, kind="stable")[:self.pool_size]
        chosen = int(best[self.rng.integers(0, len(best))])
        sy, sx = coords[chosen]
        logger.debug("Tile %s: origin (%d, %d), cost %.1f (best %.1f)",
                     (position.row, position.col), sy, sx, costs[chosen], costs[best[0]])
        return CandidatePatch(sy, sx, float(costs[chosen]))
