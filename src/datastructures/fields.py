"""Row data structures passed to the tracer flux kernel."""
from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass
class RowContext:
    """One logical row of cells along the active sweep direction.

    Parameters
    ----------
    primitives : np.ndarray
        Primitive variables for every cell of the row, shape (n, nvar).
        A 1D array is treated as a single-variable (density only) row.
    direction : int
        Sweep direction (0, 1 or 2).
    transverse : tuple of int
        The two fixed logical indices of the row, in increasing axis order
        (e.g. (j, k) for direction 0, (i, k) for direction 1).
    density_index : int, optional
        Column of `primitives` holding the density. Default is 0.
    """
    primitives: np.ndarray
    direction: int
    transverse: Tuple[int, int] = (0, 0)
    density_index: int = 0

    def __post_init__(self):
        if self.direction not in (0, 1, 2):
            raise ValueError(f"direction must be 0, 1 or 2, got {self.direction}")
        if len(self.transverse) != 2:
            raise ValueError(f"transverse must hold two indices, got {self.transverse}")
        self.transverse = tuple(int(t) for t in self.transverse)
        self.primitives = np.asarray(self.primitives, dtype=np.float64)
        if self.primitives.ndim == 1:
            self.primitives = self.primitives[:, None]

    @property
    def n_cells(self) -> int:
        return self.primitives.shape[0]

    @property
    def density(self) -> np.ndarray:
        """Contiguous density column of the row."""
        return np.ascontiguousarray(self.primitives[:, self.density_index])

    def cell_index(self, s: int = 0) -> Tuple[int, int, int]:
        """Logical (i, j, k) of cell `s` along the row."""
        index = list(self.transverse)
        index.insert(self.direction, s)
        return tuple(index)
