"""Finite volume tracer diffusion package.

This package contains the interface gradient operator and the diffusive
flux assembler used by dimensionally-split finite volume sweeps.
"""

# Core flux functions
from .core.tracer_flux import TracerFluxAssembler, compute_tracer_flux, allocate_flux
from .core.gradient_cache import GradientCache
from .discretization.gradient.structured_gradient import compute_tracer_gradient

__all__ = [
    "TracerFluxAssembler",
    "compute_tracer_flux",
    "allocate_flux",
    "GradientCache",
    "compute_tracer_gradient",
]
