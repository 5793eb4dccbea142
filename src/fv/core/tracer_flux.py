"""Tracer diffusion flux along one sweep row.

The assembler owns the gradient cache and the geometry strategy, and is
called once per row, per direction, per time step by the outer sweep loop:

    for each tracer:
        1. gradient of the tracer at interfaces [beg, end]
        2. chi from the run parameters
        3. width-weighted interface density
        4. F = rho_f * chi * dC/dl_d   (optionally saturated)
"""

import logging

import numpy as np

from fv.core.gradient_cache import GradientCache
from fv.core.helpers import tracer_diffusivity
from fv.discretization.diffusion.central_diff import assemble_tracer_flux, saturate_tracer_flux
from fv.discretization.gradient.structured_gradient import compute_tracer_gradient
from meshing.geometry import make_geometry

logger = logging.getLogger(__name__)


class TracerFluxAssembler:
    """Diffusive tracer flux kernel bound to one grid and configuration.

    Parameters
    ----------
    config : TracerConfig
        Geometry, active axes, tracer count and flux law.
    params : RunParameters
        Run parameters defining the diffusivity.
    grid : GridData
        Grid metadata.
    cache : GradientCache, optional
        Gradient buffer. Default is a new cache sized to the longest row of
        `grid`. Use one cache per worker.
    """

    def __init__(self, config, params, grid, cache=None):
        self.config = config
        self.params = params
        self.grid = grid
        self.geometry = make_geometry(config.geometry)
        self.axes = config.axes

        if cache is None:
            cache = GradientCache.for_grid(grid, config.n_tracers)
        elif cache.n_tracers < config.n_tracers:
            raise ValueError(
                f"Gradient cache holds {cache.n_tracers} tracers, configuration needs {config.n_tracers}"
            )
        self.cache = cache

        logger.debug(
            "Tracer flux assembler: geometry=%s axes=%s n_tracers=%d law=%s",
            self.geometry.name,
            self.axes,
            config.n_tracers,
            config.flux_law,
        )

    def _check_window(self, tracers, row, beg, end, flux):
        d = row.direction
        n = int(self.grid.npoints[d])
        index = row.cell_index(0)

        if d not in self.axes:
            raise ValueError(f"Sweep direction {d} is not an active axis {self.axes}")
        if len(tracers) < self.config.n_tracers:
            raise ValueError(f"Expected {self.config.n_tracers} tracer fields, got {len(tracers)}")
        if beg < 0 or end < beg or end + 1 >= n:
            raise IndexError(f"Interface window [{beg}, {end}] outside direction-{d} extent of {n} cells")
        if row.n_cells < end + 2:
            raise IndexError(f"Row holds {row.n_cells} cells, window [{beg}, {end}] needs {end + 2}")
        if flux.ndim != 2 or flux.shape[0] <= end or flux.shape[1] < self.config.n_tracers:
            raise IndexError(
                f"Flux array of shape {flux.shape} cannot hold interfaces [{beg}, {end}] "
                f"for {self.config.n_tracers} tracers"
            )
        for a in self.axes:
            if a == d:
                continue
            if not 1 <= index[a] < int(self.grid.npoints[a]) - 1:
                raise IndexError(
                    f"Row index {index[a]} along active axis {a} has no neighbours "
                    f"in {int(self.grid.npoints[a])} cells"
                )
        for field in tracers[: self.config.n_tracers]:
            if field.ndim != 3 or field.shape[d] < end + 2:
                raise IndexError(f"Tracer field of shape {field.shape} too short for window [{beg}, {end}]")

    def compute(self, tracers, row, beg, end, flux):
        """Write the tracer flux at interfaces [beg, end] of `row` into `flux`.

        Parameters
        ----------
        tracers : sequence of ndarray (n1, n2, n3)
            One concentration field per tracer.
        row : RowContext
            Primitive variables, sweep direction and transverse indices.
        beg, end : int
            Interface range; interface s lies between cells s and s + 1.
        flux : ndarray (n_interfaces, n_tracers)
            Output; only rows [beg, end] are written.

        Returns
        -------
        flux : ndarray
            The output array.
        """
        self._check_window(tracers, row, beg, end, flux)
        self.cache.reserve(end + 1)

        d = row.direction
        index = row.cell_index(0)
        rho = row.density
        dx = self.grid.dx[d]
        chi = tracer_diffusivity(self.params)

        for trc in range(self.config.n_tracers):
            grad = self.cache.view(trc)
            compute_tracer_gradient(
                tracers[trc], d, index, self.geometry, self.grid, beg, end, grad, self.axes
            )
            assemble_tracer_flux(rho, dx, grad, chi, d, beg, end, trc, flux)
            if self.config.flux_law == "saturated":
                saturate_tracer_flux(self.config.saturation_flux, beg, end, trc, flux)

        return flux


def compute_tracer_flux(tracers, row, beg, end, flux, config, params, grid, cache=None):
    """Functional form of `TracerFluxAssembler.compute`."""
    assembler = TracerFluxAssembler(config, params, grid, cache=cache)
    return assembler.compute(tracers, row, beg, end, flux)


def allocate_flux(grid, config, direction):
    """Zeroed flux array for every interface along `direction`."""
    return np.zeros((int(grid.npoints[direction]), config.n_tracers), dtype=np.float64)
