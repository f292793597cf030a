"""Synthesis parameters."""

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


@dataclass
class QuiltingParams:
    """Tiling parameters for one synthesis run.

    Args:
        tile_size: Side of the square tiles copied from the exemplar.
        overlap: Width in pixels of the strip shared by neighbouring tiles.
        candidate_budget: Number of random source origins scored per tile (K).
        selection_pool_size: How many of the lowest-cost candidates are
            eligible for the final random pick (N). Clamped to K.
        seed: Seed for the candidate sampler. None draws fresh entropy.
        workers: Worker processes used to score candidates. 1 scores them
            on the calling process.
    """

    tile_size: int = 32
    overlap: int = 6
    candidate_budget: int = 256
    selection_pool_size: int = 5
    seed: Optional[int] = None
    workers: int = 1

    @classmethod
    def from_overlap_ratio(cls, tile_size: int, overlap_ratio: float = 1/6, **kwargs) -> "QuiltingParams":
        """Builds parameters with the overlap given as a fraction of the tile size."""
        if not (0 < overlap_ratio < 1):
            raise ConfigurationError("Overlap ratio must be in (0, 1).")
        return cls(tile_size=tile_size, overlap=max(1, int(tile_size * overlap_ratio)), **kwargs)

    @property
    def step(self) -> int:
        """Stride between successive tile origins."""
        return self.tile_size - self.overlap

    @property
    def effective_pool_size(self) -> int:
        return min(self.selection_pool_size, self.candidate_budget)

    def validate(self) -> "QuiltingParams":
        if self.tile_size <= 0:
            raise ConfigurationError(f"Tile size must be positive, got {self.tile_size}.")
        if self.overlap <= 0:
            raise ConfigurationError(f"Overlap must be positive, got {self.overlap}.")
        if self.overlap >= self.tile_size:
            raise ConfigurationError(
                f"Overlap ({self.overlap}) must be smaller than tile size ({self.tile_size})."
            )
        if self.candidate_budget <= 0:
            raise ConfigurationError("Candidate budget must be positive.")
        if self.selection_pool_size <= 0:
            raise ConfigurationError("Selection pool size must be positive.")
        if self.workers <= 0:
            raise ConfigurationError("Number of workers must be positive.")
        return self
