"""Coordinate-system strategies providing metric scale factors.

Each geometry converts logical-coordinate derivatives into derivatives
along the physical line elements of the coordinate system:

    Cartesian:   {dl1, dl2, dl3} = {dx,       dy, dz}
    Cylindrical: {dl1, dl2, dl3} = {dr,       dz, - }
    Polar:       {dl1, dl2, dl3} = {dr,   r.dphi, dz}
    Spherical:   {dl1, dl2, dl3} = {dr, r.dtheta, r.sin(theta).dphi}

The scale factors are evaluated at the interfaces s + 1/2, s in [beg, end],
of one sweep row. The radius is taken at the interface when sweeping along
direction 0 and at the cell center otherwise; the same holds for theta
along direction 1.
"""

from abc import ABC, abstractmethod

import numpy as np


class CoordinateSingularityError(ValueError):
    """A metric scale factor is undefined (r = 0 or sin(theta) = 0)."""


class Geometry(ABC):
    """Metric strategy for one orthogonal coordinate system."""

    name = None

    def radius(self, grid, direction, index, beg, end):
        """Radius at the row interfaces, shape (end - beg + 1,)."""
        if direction == 0:
            return grid.xr[0, beg:end + 1].copy()
        return np.full(end - beg + 1, grid.x[0, index[0]])

    def colatitude(self, grid, direction, index, beg, end):
        """Polar angle theta at the row interfaces, shape (end - beg + 1,)."""
        if direction == 1:
            return grid.xr[1, beg:end + 1].copy()
        return np.full(end - beg + 1, grid.x[1, index[1]])

    def scale_factors(self, grid, direction, index, beg, end, axes=(0, 1, 2)):
        """Metric scale factors h[c, s - beg] for components c in `axes`.

        Components not listed in `axes` are left at 1 and are never
        evaluated, so singular coordinates of inactive axes are ignored.
        """
        h = np.ones((3, end - beg + 1), dtype=np.float64)
        self._fill_scales(h, grid, direction, index, beg, end, axes)

        if not np.all(np.isfinite(h)):
            c = int(np.argwhere(~np.isfinite(h))[0, 0])
            raise CoordinateSingularityError(
                f"{self.name} metric factor for component {c} is singular on the "
                f"direction-{direction} row at cell {index} (interfaces {beg}..{end})"
            )
        return h

    @abstractmethod
    def _fill_scales(self, h, grid, direction, index, beg, end, axes):
        """Write the non-unit scale factors into `h` in place."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class CartesianGeometry(Geometry):
    name = "cartesian"

    def _fill_scales(self, h, grid, direction, index, beg, end, axes):
        pass


class CylindricalGeometry(Geometry):
    """(r, z) coordinates; both line elements are coordinate differentials."""

    name = "cylindrical"

    def _fill_scales(self, h, grid, direction, index, beg, end, axes):
        pass


class PolarGeometry(Geometry):
    name = "polar"

    def _fill_scales(self, h, grid, direction, index, beg, end, axes):
        if 1 in axes:
            with np.errstate(divide="ignore", invalid="ignore"):
                h[1] = 1.0 / self.radius(grid, direction, index, beg, end)


class SphericalGeometry(Geometry):
    name = "spherical"

    def _fill_scales(self, h, grid, direction, index, beg, end, axes):
        if 1 not in axes and 2 not in axes:
            return
        with np.errstate(divide="ignore", invalid="ignore"):
            r_1 = 1.0 / self.radius(grid, direction, index, beg, end)
            if 1 in axes:
                h[1] = r_1
            if 2 in axes:
                theta = self.colatitude(grid, direction, index, beg, end)
                # sin(pi) is ~1e-16, not 0; treat it as singular too
                s = np.sin(theta)
                s[np.abs(s) < 1e-14] = 0.0
                h[2] = r_1 / s


_GEOMETRIES = {
    cls.name: cls
    for cls in (CartesianGeometry, CylindricalGeometry, PolarGeometry, SphericalGeometry)
}


def make_geometry(name: str) -> Geometry:
    """Select the geometry strategy by name."""
    try:
        return _GEOMETRIES[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown geometry '{name}', expected one of {tuple(_GEOMETRIES)}") from None
