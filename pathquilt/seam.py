"""Minimum-cost seam paths through overlap strips.

A seam is found with dynamic programming over a cost field: each row
accumulates the cheapest of its three upper neighbours, then the path is
recovered by walking back up from the cheapest cell of the last row. The
path holds one cut position per row and moves at most one column per row,
so it is always a connected boundary.
"""

import numpy as np


def accumulate_cost(cost: np.ndarray) -> np.ndarray:
    """Accumulated-cost grid of a 2D cost field, top row first.

    `A[i, j] = cost[i, j] + min(A[i-1, j-1], A[i-1, j], A[i-1, j+1])`,
    neighbours outside the field being left out of the min.
    """
    acc = np.array(cost, dtype=np.float64, copy=True)
    if acc.ndim != 2:
        raise ValueError(f"Cost field must be 2D, got shape {acc.shape}")
    h, w = acc.shape
    for r in range(1, h):
        prev = acc[r - 1]
        best = prev.copy()
        if w > 1:
            best[1:] = np.minimum(best[1:], prev[:-1])
            best[:-1] = np.minimum(best[:-1], prev[1:])
        acc[r] += best
    return acc


def backtrack(acc: np.ndarray) -> np.ndarray:
    """Recovers the seam from an accumulated-cost grid.

    Starts at the cheapest cell of the last row (lowest index on ties) and
    climbs row by row. Among equal predecessors the straight-ahead one is
    preferred, then left, then right, to keep the cut from wobbling.
    """
    h, w = acc.shape
    path = np.zeros(h, dtype=np.intp)
    if h == 0 or w == 0:
        return path[:0]
    c = int(np.argmin(acc[h - 1]))
    path[h - 1] = c
    for r in range(h - 2, -1, -1):
        best_c = c
        best_cost = acc[r, c]
        for cand in (c - 1, c + 1):
            if 0 <= cand < w and acc[r, cand] < best_cost:
                best_c, best_cost = cand, acc[r, cand]
        c = best_c
        path[r] = c
    return path


def vertical_seam(cost: np.ndarray) -> np.ndarray:
    """Seam through a vertical strip (rows, thickness): one column index per row."""
    return backtrack(accumulate_cost(cost))


def horizontal_seam(cost: np.ndarray) -> np.ndarray:
    """Seam through a horizontal strip (thickness, cols): one row index per column."""
    return vertical_seam(np.asarray(cost).T)


def seam_mask(path: np.ndarray, shape, axis: int = 1) -> np.ndarray:
    """Boolean "keep new" mask of a strip cut by `path`.

    With axis=1 (vertical strip) pixel (r, c) is new when c >= path[r];
    with axis=0 (horizontal strip) pixel (r, c) is new when r >= path[c].
    """
    h, w = shape
    if axis == 1:
        return np.arange(w)[None, :] >= np.asarray(path)[:, None]
    return np.arange(h)[:, None] >= np.asarray(path)[None, :]
