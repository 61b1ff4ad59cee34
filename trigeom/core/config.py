"""Configuration objects for trigeom random site sampling."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_SEED, RADIAL_MEAN, RADIAL_STDDEV


@dataclass
class SamplingConfig:
    """Parameters for a caller-owned site sampler.

    Attributes
    ----------
    seed : int
        Initial value of the sampler's seed counter.
    radial_mean, radial_stddev : float
        Parameters of the normal draw whose absolute value is the radial
        offset of each site.
    """
    seed: int = DEFAULT_SEED
    radial_mean: float = RADIAL_MEAN
    radial_stddev: float = RADIAL_STDDEV

    def __post_init__(self):
        if self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
        if self.radial_stddev < 0:
            raise ValueError(f"radial_stddev must be non-negative, got {self.radial_stddev}")


__all__ = ['SamplingConfig']
