from numba import njit

from fv.core.helpers import interpolate_to_interface


# ──────────────────────────────────────────────────────────────────────────────
# Fickian tracer flux
# ──────────────────────────────────────────────────────────────────────────────
@njit(cache=True)
def assemble_tracer_flux(rho, dx, grad, chi, direction, beg, end, trc, flux):
    """
    Classical diffusive flux F = rho_f * chi * dC/dl_d at interfaces [beg, end].

    rho, dx : density and cell widths along the row
    grad    : gradient buffer (n, 3) for this tracer
    flux    : output (n_interfaces, n_tracers); column `trc` is written
    """
    for s in range(beg, end + 1):
        rho_f = interpolate_to_interface(rho[s], rho[s + 1], dx[s], dx[s + 1])
        flux[s, trc] = rho_f * chi * grad[s, direction]


# ──────────────────────────────────────────────────────────────────────────────
# Saturated (flux-limited) tracer flux
# ──────────────────────────────────────────────────────────────────────────────
@njit(cache=True)
def saturate_tracer_flux(q, beg, end, trc, flux):
    """
    Spitzer-type saturation F <- q / (|F| + q) * F, applied in place.
    |F| stays below the free-streaming bound q.
    """
    for s in range(beg, end + 1):
        F = flux[s, trc]
        flux[s, trc] = q / (abs(F) + q) * F
