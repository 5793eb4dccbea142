import sys
from pathlib import Path

import numpy as np
import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from datastructures import RunParameters  # noqa: E402
from meshing.simple_structured import create_structured_grid, uniform_edges  # noqa: E402


@pytest.fixture
def unit_params():
    """REYNOLDS=10 and unit everything else: chi = 0.2."""
    return RunParameters(u_flow=1.0, length=1.0, reynolds=10.0, unit_length=1.0, unit_velocity=1.0)


@pytest.fixture
def grid_1d():
    """5 uniform Cartesian cells of width 0.1."""
    return create_structured_grid(uniform_edges(5, 0.0, 0.5))


@pytest.fixture
def grid_3d():
    """8 x 6 x 5 cells: stretched along direction 0, one ghost layer along 1 and 2."""
    edges1 = np.concatenate(([0.0], np.cumsum(np.linspace(0.05, 0.15, 8)))) + 0.5
    return create_structured_grid(
        edges1,
        uniform_edges(4, 0.5, 2.5, n_ghost=1),
        uniform_edges(3, 0.0, 1.5, n_ghost=1),
    )
