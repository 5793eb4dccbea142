"""Structured grid metadata builder for the tracer flux kernel.

This is a minimal implementation for orthogonal structured grids: it
derives cell widths, centers and inverse spacings from caller-supplied
interface coordinates, using pure numpy arrays.
"""

import numpy as np
from .grid_data import GridData

# Interface coordinates of a single-cell, inactive direction
_INACTIVE_EDGES = np.array([0.0, 1.0])


def _direction_metrics(edges):
    """Compute (dx, x, xl, xr, inv_dxi) for one direction."""
    edges = np.asarray(edges, dtype=np.float64)
    if edges.ndim != 1 or edges.shape[0] < 2:
        raise ValueError("Interface coordinates must be a 1D array with at least two entries")

    xl = edges[:-1]
    xr = edges[1:]
    dx = xr - xl
    if np.any(dx <= 0.0):
        raise ValueError("Interface coordinates must be strictly increasing")

    # Cell centers at the geometric midpoint of each cell
    x = 0.5 * (xl + xr)

    inv_dxi = np.full(x.shape[0], np.nan)
    inv_dxi[:-1] = 1.0 / np.diff(x)

    return dx, x, xl, xr, inv_dxi


def create_structured_grid(edges1, edges2=None, edges3=None) -> GridData:
    """Create grid metadata from interface coordinates.

    Parameters
    ----------
    edges1 : array_like
        Interface coordinates along direction 0 (n1 + 1 values, ghosts included).
    edges2, edges3 : array_like, optional
        Interface coordinates along directions 1 and 2. Omitted directions
        get a single unit-width cell.

    Returns
    -------
    GridData
        Grid metadata padded to the longest direction.
    """
    per_direction = [
        _direction_metrics(e if e is not None else _INACTIVE_EDGES)
        for e in (edges1, edges2, edges3)
    ]

    npoints = np.array([m[0].shape[0] for m in per_direction], dtype=np.int64)
    nmax = int(npoints.max())

    # dx, x, xl, xr, inv_dxi padded to (3, nmax)
    padded = [np.full((3, nmax), np.nan) for _ in range(5)]
    for d, metrics in enumerate(per_direction):
        n = npoints[d]
        for array, values in zip(padded, metrics):
            array[d, :n] = values

    dx, x, xl, xr, inv_dxi = padded
    inv_dx = 1.0 / dx

    return GridData(
        npoints,
        np.ascontiguousarray(dx),
        np.ascontiguousarray(inv_dx),
        np.ascontiguousarray(x),
        np.ascontiguousarray(xl),
        np.ascontiguousarray(xr),
        np.ascontiguousarray(inv_dxi),
    )


def uniform_edges(n_cells, lo=0.0, hi=1.0, n_ghost=0):
    """Interface coordinates of `n_cells` uniform cells on [lo, hi] plus ghosts."""
    h = (hi - lo) / n_cells
    return lo + h * np.arange(-n_ghost, n_cells + n_ghost + 1, dtype=np.float64)
