"""Data structures for tracer flux configuration and sweep rows.

This module defines the configuration, run parameters and per-row
context consumed by the tracer diffusion kernel.
"""

from .config import TracerConfig, RunParameters, GEOMETRIES, FLUX_LAWS
from .fields import RowContext

__all__ = [
    # Configuration
    "TracerConfig",
    "RunParameters",
    "GEOMETRIES",
    "FLUX_LAWS",
    # Rows
    "RowContext",
]
