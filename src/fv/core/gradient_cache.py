"""Reusable per-tracer gradient buffer."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


class GradientCache:
    """Per-tracer, per-interface, three-component gradient buffer.

    Allocated once, sized to the longest row of the grid, and reused across
    sweeps. Owned by a single assembler; share it between workers only with
    external serialization.

    Parameters
    ----------
    n_tracers : int
        Number of tracer species.
    max_points : int
        Longest row length (ghost cells included) the buffer must hold.
    """

    def __init__(self, n_tracers, max_points):
        if n_tracers < 1 or max_points < 1:
            raise ValueError(
                f"GradientCache needs positive sizes, got n_tracers={n_tracers}, max_points={max_points}"
            )
        self.values = np.zeros((n_tracers, max_points, 3), dtype=np.float64)
        logger.debug("Allocated gradient cache of shape %s", self.values.shape)

    @classmethod
    def for_grid(cls, grid, n_tracers):
        """Cache sized to the longest direction of `grid`."""
        return cls(n_tracers, int(np.max(grid.npoints)))

    @property
    def n_tracers(self) -> int:
        return self.values.shape[0]

    @property
    def max_points(self) -> int:
        return self.values.shape[1]

    def reserve(self, n_points):
        """Grow the buffer to hold at least `n_points` interfaces; never shrinks."""
        if n_points <= self.max_points:
            return
        logger.warning(
            "Growing gradient cache from %d to %d points; presize it to the largest row",
            self.max_points,
            n_points,
        )
        grown = np.zeros((self.n_tracers, n_points, 3), dtype=np.float64)
        grown[:, : self.max_points] = self.values
        self.values = grown

    def view(self, trc):
        """(max_points, 3) gradient buffer of tracer `trc`."""
        return self.values[trc]
