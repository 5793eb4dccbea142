import numpy as np
import pytest

from fv.discretization.gradient.structured_gradient import compute_tracer_gradient
from meshing.geometry import make_geometry

A, B, C = 1.5, -0.75, 2.0


def _linear_field(grid):
    """C = A x1 + B x2 + C x3 at cell centers."""
    n1, n2, n3 = (int(n) for n in grid.npoints)
    x1 = grid.x[0, :n1][:, None, None]
    x2 = grid.x[1, :n2][None, :, None]
    x3 = grid.x[2, :n3][None, None, :]
    return A * x1 + B * x2 + C * x3


def _transverse_derivative(grid, axis, m, slope):
    """Exact central-difference value of a linear field along a transverse axis."""
    x = grid.x[axis]
    return 0.5 * slope * (x[m + 1] - x[m - 1]) * grid.inv_dx[axis, m]


def test_along_axis_uniform_cartesian(grid_1d):
    field = np.array([0.0, 1.0, 2.0, 3.0, 4.0]).reshape(5, 1, 1)
    out = np.full((5, 3), np.nan)

    compute_tracer_gradient(field, 0, (0, 0, 0), make_geometry("cartesian"), grid_1d, 0, 3, out, axes=(0,))

    np.testing.assert_allclose(out[:4, 0], np.diff(field[:, 0, 0]) / 0.1, rtol=1e-12)
    # Inactive components are zeroed within the window only
    assert np.all(out[:4, 1:] == 0.0)
    assert np.all(np.isnan(out[4]))


def test_along_axis_random_field(grid_3d):
    rng = np.random.default_rng(7)
    field = rng.random((8, 6, 5))
    out = np.zeros((8, 3))

    compute_tracer_gradient(field, 0, (0, 3, 2), make_geometry("cartesian"), grid_3d, 0, 6, out)

    expected = np.diff(field[:, 3, 2]) * grid_3d.inv_dxi[0, :7]
    np.testing.assert_allclose(out[:7, 0], expected, rtol=1e-14)


@pytest.mark.parametrize("geometry", ["cartesian", "polar", "spherical"])
@pytest.mark.parametrize("direction", [0, 1, 2])
def test_transverse_components_vanish_for_transversely_constant_field(grid_3d, geometry, direction):
    n = int(grid_3d.npoints[direction])
    profile = np.sin(np.arange(n, dtype=np.float64))
    shape = [1, 1, 1]
    shape[direction] = n
    field = np.broadcast_to(profile.reshape(shape), (8, 6, 5)).copy()
    index = [4, 2, 2]
    out = np.full((8, 3), np.nan)

    compute_tracer_gradient(field, direction, tuple(index), make_geometry(geometry), grid_3d, 1, n - 3, out)

    transverse = [c for c in range(3) if c != direction]
    assert np.all(out[1:n - 2, transverse] == 0.0)
    assert np.all(out[1:n - 2, direction] != 0.0)


def test_transverse_components_vanish_cylindrical(grid_3d):
    field = np.broadcast_to(np.arange(8.0)[:, None, None] ** 2, (8, 6, 5)).copy()
    out = np.zeros((8, 3))

    compute_tracer_gradient(field, 0, (0, 2, 0), make_geometry("cylindrical"), grid_3d, 0, 6, out, axes=(0, 1))

    assert np.all(out[:7, 1:] == 0.0)


def test_polar_radial_sweep(grid_3d):
    field = _linear_field(grid_3d)
    j, k = 2, 3
    out = np.zeros((8, 3))

    compute_tracer_gradient(field, 0, (0, j, k), make_geometry("polar"), grid_3d, 0, 6, out)

    r = grid_3d.xr[0, :7]
    np.testing.assert_allclose(out[:7, 0], A, rtol=1e-12)
    np.testing.assert_allclose(out[:7, 1], _transverse_derivative(grid_3d, 1, j, B) / r, rtol=1e-12)
    np.testing.assert_allclose(out[:7, 2], _transverse_derivative(grid_3d, 2, k, C), rtol=1e-12)


def test_spherical_radial_sweep(grid_3d):
    field = _linear_field(grid_3d)
    j, k = 3, 1
    out = np.zeros((8, 3))

    compute_tracer_gradient(field, 0, (0, j, k), make_geometry("spherical"), grid_3d, 0, 6, out)

    r = grid_3d.xr[0, :7]
    theta = grid_3d.x[1, j]
    np.testing.assert_allclose(out[:7, 1], B / r, rtol=1e-12)
    np.testing.assert_allclose(out[:7, 2], C / (r * np.sin(theta)), rtol=1e-12)


def test_spherical_polar_angle_sweep(grid_3d):
    field = _linear_field(grid_3d)
    i, k = 4, 2
    out = np.zeros((8, 3))

    compute_tracer_gradient(field, 1, (i, 0, k), make_geometry("spherical"), grid_3d, 0, 4, out)

    r = grid_3d.x[0, i]
    theta = grid_3d.xr[1, :5]
    np.testing.assert_allclose(out[:5, 0], _transverse_derivative(grid_3d, 0, i, A), rtol=1e-12)
    np.testing.assert_allclose(out[:5, 1], B / r, rtol=1e-12)
    np.testing.assert_allclose(out[:5, 2], C / (r * np.sin(theta)), rtol=1e-12)


def test_spherical_azimuthal_sweep(grid_3d):
    field = _linear_field(grid_3d)
    i, j = 5, 4
    out = np.zeros((8, 3))

    compute_tracer_gradient(field, 2, (i, j, 0), make_geometry("spherical"), grid_3d, 0, 3, out)

    r = grid_3d.x[0, i]
    theta = grid_3d.x[1, j]
    np.testing.assert_allclose(out[:4, 1], B / r, rtol=1e-12)
    np.testing.assert_allclose(out[:4, 2], C / (r * np.sin(theta)), rtol=1e-12)


def test_only_declared_axes_are_computed(grid_3d):
    field = _linear_field(grid_3d)
    out = np.full((8, 3), 99.0)

    compute_tracer_gradient(field, 0, (0, 2, 2), make_geometry("cartesian"), grid_3d, 0, 6, out, axes=(0, 2))

    np.testing.assert_allclose(out[:7, 0], A, rtol=1e-12)
    assert np.all(out[:7, 1] == 0.0)
    np.testing.assert_allclose(out[:7, 2], C, rtol=1e-12)
    assert np.all(out[7] == 99.0)
