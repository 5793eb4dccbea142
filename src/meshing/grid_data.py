"""
GridData: per-direction metadata of a structured, orthogonal finite volume grid.

Indexing Conventions:
- Every array has shape (3, nmax): first index is the direction d (0, 1, 2),
  second index is the logical cell index along d (ghost cells included).
- Directions with fewer than nmax cells are padded with NaN.
- Interface i+1/2 sits between cells i and i+1; xr[d, i] is its coordinate.

Geometry Conventions:
- Direction 0 is x (Cartesian) or the radius r (cylindrical, polar, spherical).
- Direction 1 is y, z (cylindrical), phi (polar) or theta (spherical).
- Direction 2 is z, z (polar) or phi (spherical).
"""

from numba import types
from numba.experimental import jitclass

grid_data_spec = [
    # --- Extents ---
    ("npoints", types.int64[:]),             # Number of cells along each direction
    # --- Cell Geometry ---
    ("dx", types.float64[:, :]),             # Cell widths
    ("inv_dx", types.float64[:, :]),         # 1 / dx
    ("x", types.float64[:, :]),              # Cell-center coordinates
    # --- Interface Geometry ---
    ("xl", types.float64[:, :]),             # Left interface coordinates (i-1/2)
    ("xr", types.float64[:, :]),             # Right interface coordinates (i+1/2)
    ("inv_dxi", types.float64[:, :]),        # 1 / (x[i+1] - x[i]), spacing across interface i+1/2
]


@jitclass(grid_data_spec)
class GridData:
    def __init__(self, npoints, dx, inv_dx, x, xl, xr, inv_dxi):
        # --- Extents ---
        self.npoints = npoints

        # --- Cells ---
        self.dx = dx
        self.inv_dx = inv_dx
        self.x = x

        # --- Interfaces ---
        self.xl = xl
        self.xr = xr
        self.inv_dxi = inv_dxi
