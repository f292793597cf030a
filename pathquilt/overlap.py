"""Overlap cost evaluation between already-synthesized output and a candidate patch."""

from typing import Tuple

import numpy as np


def pixel_cost(old: np.ndarray, new: np.ndarray) -> np.ndarray:
    """Squared Euclidean RGB distance per pixel.

    Args:
        old: Existing output pixels (h, w, 3).
        new: Candidate pixels of the same shape.

    Returns:
        Float cost field of shape (h, w).
    """
    if old.shape != new.shape:
        raise ValueError(f"Shape mismatch: {old.shape} vs {new.shape}")
    diff = old.astype(np.float64) - new.astype(np.float64)
    return np.sum(diff ** 2, axis=-1)


def overlap_cost(old: np.ndarray, new: np.ndarray) -> Tuple[np.ndarray, float]:
    """Cost field over an overlap strip and its sum (SSD).

    An empty strip yields an empty field and zero cost.
    """
    if old.size == 0 or new.size == 0:
        return np.zeros(old.shape[:2], dtype=np.float64), 0.0
    field = pixel_cost(old, new)
    return field, float(field.sum())


def overlap_mask(tile_h: int, tile_w: int, left: int, top: int) -> np.ndarray:
    """Union of the left strip (width `left`) and top strip (height `top`) of a tile."""
    mask = np.zeros((tile_h, tile_w), dtype=bool)
    mask[:, :left] = True
    mask[:top, :] = True
    return mask


def masked_cost(old_region: np.ndarray, candidate: np.ndarray, mask: np.ndarray) -> float:
    """Sum of squared differences restricted to `mask`; corner pixels count once."""
    if not mask.any():
        return 0.0
    diff = old_region[mask].astype(np.float64) - candidate[mask].astype(np.float64)
    return float(np.sum(diff ** 2))
