"""Configuration and run-parameter data structures."""
from dataclasses import dataclass, asdict
from typing import Optional, Tuple
import pandas as pd

GEOMETRIES = ("cartesian", "cylindrical", "polar", "spherical")
FLUX_LAWS = ("linear", "saturated")


@dataclass
class TracerConfig:
    """Static configuration of the tracer diffusion kernel.

    Parameters
    ----------
    geometry : str, optional
        Coordinate system: 'cartesian', 'cylindrical', 'polar' or
        'spherical'. Default is 'cartesian'.
    dimensions : int, optional
        Number of active spatial dimensions (1, 2 or 3). Default is 1.
    n_tracers : int, optional
        Number of tracer species. Default is 1.
    active_axes : tuple of int, optional
        Explicit subset of {0, 1, 2} for which gradient components are
        computed. Default is None, meaning the first `dimensions` axes.
    flux_law : str, optional
        'linear' (Fickian) or 'saturated' (Spitzer-type limiter).
        Default is 'linear'.
    saturation_flux : float, optional
        Free-streaming bound q used by the saturated law. Default is None.
    """
    geometry: str = "cartesian"
    dimensions: int = 1
    n_tracers: int = 1
    active_axes: Optional[Tuple[int, ...]] = None
    flux_law: str = "linear"
    saturation_flux: Optional[float] = None

    def __post_init__(self):
        self.geometry = self.geometry.lower()
        self.flux_law = self.flux_law.lower()

        if self.geometry not in GEOMETRIES:
            raise ValueError(f"Unknown geometry '{self.geometry}', expected one of {GEOMETRIES}")
        if self.dimensions not in (1, 2, 3):
            raise ValueError(f"dimensions must be 1, 2 or 3, got {self.dimensions}")
        if self.geometry == "cylindrical" and self.dimensions == 3:
            raise ValueError("Cylindrical geometry supports at most 2 dimensions")
        if self.n_tracers < 1:
            raise ValueError(f"n_tracers must be positive, got {self.n_tracers}")

        if self.active_axes is not None:
            axes = tuple(sorted(set(int(a) for a in self.active_axes)))
            if not axes or any(a not in (0, 1, 2) for a in axes):
                raise ValueError(f"active_axes must be a non-empty subset of (0, 1, 2), got {self.active_axes}")
            if axes[-1] >= self.dimensions:
                raise ValueError(
                    f"active_axes {axes} reach beyond a {self.dimensions}D configuration"
                )
            self.active_axes = axes

        if self.flux_law not in FLUX_LAWS:
            raise ValueError(f"Unknown flux law '{self.flux_law}', expected one of {FLUX_LAWS}")
        if self.flux_law == "saturated" and not (self.saturation_flux and self.saturation_flux > 0):
            raise ValueError("Saturated flux law requires a positive saturation_flux")

    @property
    def axes(self) -> Tuple[int, ...]:
        """Axes for which gradient components are computed."""
        if self.active_axes is not None:
            return self.active_axes
        return tuple(range(self.dimensions))

    def to_dataframe(self) -> pd.DataFrame:
        """Convert configuration to single-row DataFrame."""
        return pd.DataFrame([asdict(self)])


@dataclass
class RunParameters:
    """Run parameters controlling the tracer diffusivity.

    Parameters
    ----------
    u_flow : float
        Characteristic flow velocity (U_FLOW).
    length : float
        Reference length (LENGTH).
    reynolds : float
        Reynolds number controlling the diffusivity (REYNOLDS).
    unit_length : float, optional
        Length normalization (UNIT_LENGTH). Defaults to `length`.
    unit_velocity : float, optional
        Velocity normalization (UNIT_VELOCITY). Defaults to `u_flow`.
    """
    u_flow: float
    length: float
    reynolds: float
    unit_length: Optional[float] = None
    unit_velocity: Optional[float] = None

    def __post_init__(self):
        if self.unit_length is None:
            self.unit_length = self.length
        if self.unit_velocity is None:
            self.unit_velocity = self.u_flow

        if self.reynolds <= 0:
            raise ValueError(f"REYNOLDS must be positive, got {self.reynolds}")
        if self.unit_length <= 0 or self.unit_velocity <= 0:
            raise ValueError(
                f"Normalization units must be positive, got UNIT_LENGTH={self.unit_length}, "
                f"UNIT_VELOCITY={self.unit_velocity}"
            )

    @classmethod
    def from_mapping(cls, params) -> "RunParameters":
        """Build from a mapping keyed by the upper-case run parameter names."""
        return cls(
            u_flow=params["U_FLOW"],
            length=params["LENGTH"],
            reynolds=params["REYNOLDS"],
            unit_length=params.get("UNIT_LENGTH"),
            unit_velocity=params.get("UNIT_VELOCITY"),
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Convert run parameters to single-row DataFrame."""
        return pd.DataFrame([asdict(self)])
