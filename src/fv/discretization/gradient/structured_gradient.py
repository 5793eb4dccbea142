"""Tracer gradient at the interfaces of one sweep row on structured grids.

For a sweep along direction d, returns (dC/dl1, dC/dl2, dC/dl3) at every
interface s + 1/2, s in [beg, end]. The component along d is a forward
difference across the interface; the two transverse components are
central differences averaged over the two cells sharing the interface:

    dC/dl_a = 0.25 * (C[s, m+1] + C[s+1, m+1] - C[s, m-1] - C[s+1, m-1]) / dx_a[m]

where m is the fixed row index along the transverse axis a. Each
component is multiplied by the metric scale factor of the geometry.
"""

from numba import njit


@njit(cache=True)
def normal_gradient(line, inv_dxi, scale, beg, end, comp, out):
    """Forward difference across interfaces s + 1/2 along the sweep axis."""
    for s in range(beg, end + 1):
        out[s, comp] = (line[s + 1] - line[s]) * inv_dxi[s] * scale[s - beg]


@njit(cache=True)
def transverse_gradient(plus, minus, inv_dl, scale, beg, end, comp, out):
    """Central difference across the transverse neighbours of each interface.

    Differences are formed before summing so that a field constant along the
    transverse axis gives exactly zero.
    """
    for s in range(beg, end + 1):
        out[s, comp] = (
            0.25 * ((plus[s] - minus[s]) + (plus[s + 1] - minus[s + 1])) * inv_dl * scale[s - beg]
        )


@njit(cache=True)
def _zero_component(beg, end, comp, out):
    for s in range(beg, end + 1):
        out[s, comp] = 0.0


def _row(field, direction, index, shift_axis=-1, shift=0):
    """1D view of `field` along `direction` through cell `index`."""
    sel = list(index)
    if shift_axis >= 0:
        sel[shift_axis] += shift
    sel[direction] = slice(None)
    return field[tuple(sel)]


def compute_tracer_gradient(field, direction, index, geometry, grid, beg, end, out, axes=(0, 1, 2)):
    """Compute the tracer gradient at the interfaces of one sweep row.

    Parameters
    ----------
    field : ndarray (n1, n2, n3)
        Cell-centered tracer concentration.
    direction : int
        Sweep direction d (0, 1 or 2).
    index : tuple of int
        Logical (i, j, k) of a cell of the row; the entry at `direction`
        is ignored.
    geometry : Geometry
        Coordinate-system strategy supplying the metric scale factors.
    grid : GridData
        Grid metadata.
    beg, end : int
        Interface range; interface s lies between cells s and s + 1.
    out : ndarray (>= end + 1, 3)
        Gradient buffer; rows [beg, end] are overwritten.
    axes : tuple of int, optional
        Active axes. Components of inactive axes are set to zero.

    Returns
    -------
    out : ndarray
        The gradient buffer.
    """
    scales = geometry.scale_factors(grid, direction, index, beg, end, axes)
    line = _row(field, direction, index)

    for comp in range(3):
        if comp not in axes:
            _zero_component(beg, end, comp, out)
        elif comp == direction:
            normal_gradient(line, grid.inv_dxi[direction], scales[comp], beg, end, comp, out)
        else:
            m = index[comp]
            transverse_gradient(
                _row(field, direction, index, comp, +1),
                _row(field, direction, index, comp, -1),
                grid.inv_dx[comp, m],
                scales[comp],
                beg,
                end,
                comp,
                out,
            )

    return out
