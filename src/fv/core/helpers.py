import numpy as np
from numba import njit, prange


@njit(inline="always", cache=True)
def interpolate_to_interface(q_left, q_right, dx_left, dx_right):
    """Width-weighted linear interpolation of a cell quantity to the shared face."""
    return (q_left * dx_left + q_right * dx_right) / (dx_left + dx_right)


@njit(parallel=False, cache=True)
def interface_density(rho, dx, beg, end, out=None):
    """
    Interface densities rho[s + 1/2] for s in [beg, end] along one row.
    Entries outside the window are left untouched.
    """
    if out is None:
        rho_face = np.zeros(rho.shape[0], dtype=np.float64)
    else:
        rho_face = out

    for s in prange(beg, end + 1):
        rho_face[s] = interpolate_to_interface(rho[s], rho[s + 1], dx[s], dx[s + 1])

    return rho_face


def tracer_diffusivity(params):
    """Nondimensional tracer diffusivity chi.

    chi = (2 U_FLOW LENGTH / REYNOLDS) / (UNIT_LENGTH UNIT_VELOCITY)
    """
    del_u = 2.0 * params.u_flow
    chi = params.length * del_u / params.reynolds
    return chi / (params.unit_length * params.unit_velocity)
