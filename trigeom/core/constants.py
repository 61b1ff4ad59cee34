"""Central numerical tolerances and sampling constants.

This module centralizes the fixed thresholds used by the predicates so they
can be tuned consistently and referenced without scattering literals.
"""
from __future__ import annotations

# Predicate tolerances
EPS_COINCIDENT: float = 1e-6      # points closer than this are coincident
EPS_INCIRCLE: float = 1e-6        # in-circle determinant must exceed this
EPS_PARALLEL: float = 1e-3        # |det| below this means parallel lines

# Random site sampling
DEFAULT_SEED: int = 1             # initial value of the process-wide counter
RADIAL_MEAN: float = 0.5          # half-normal radial offset parameters
RADIAL_STDDEV: float = 0.5

__all__ = [
    'EPS_COINCIDENT',
    'EPS_INCIRCLE',
    'EPS_PARALLEL',
    'DEFAULT_SEED',
    'RADIAL_MEAN',
    'RADIAL_STDDEV',
]
