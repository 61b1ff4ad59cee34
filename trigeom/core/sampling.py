"""Seeded random site generation.

Every draw takes one value from a :class:`SeedCounter` and seeds a fresh
``numpy.random.Generator`` with it, so a sequence of draws is reproducible
from the counter's starting value alone; no generator state is carried
between calls.

Module-level functions use a process-wide default counter (starting at
DEFAULT_SEED). Callers that need isolated, explicit state pass their own
counter or use a :class:`SiteSampler`.
"""
from __future__ import annotations
import math
import threading
from typing import Optional
import numpy as np

from .config import SamplingConfig
from .constants import DEFAULT_SEED, RADIAL_MEAN, RADIAL_STDDEV
from .logging_utils import get_logger
from .vector import as_point

__all__ = [
    'SeedCounter', 'SiteSampler', 'default_counter', 'reset_seed',
    'normalized_random', 'random_site',
]

logger = get_logger('trigeom.sampling')

_SEED_MASK = 0xFFFFFFFF


class SeedCounter:
    """Monotonically increasing seed source, safe to share between threads.

    Each call to :meth:`next` returns a distinct value. Concurrent callers are
    not ordered relative to each other.
    """

    def __init__(self, start: int = DEFAULT_SEED):
        if start < 0:
            raise ValueError(f"seed must be non-negative, got {start}")
        self._value = int(start)
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Seed the next draw will use (reduced to 32 bits like the drawn seeds)."""
        with self._lock:
            return self._value & _SEED_MASK

    def next(self) -> int:
        with self._lock:
            seed = self._value
            self._value += 1
        return seed & _SEED_MASK

    def reset(self, value: int = DEFAULT_SEED) -> None:
        if value < 0:
            raise ValueError(f"seed must be non-negative, got {value}")
        with self._lock:
            self._value = int(value)

    def __repr__(self) -> str:
        return f"SeedCounter(value={self.value})"


_DEFAULT_COUNTER = SeedCounter(DEFAULT_SEED)


def default_counter() -> SeedCounter:
    """The process-wide counter used when no counter is passed."""
    return _DEFAULT_COUNTER


def reset_seed(value: int = DEFAULT_SEED) -> None:
    _DEFAULT_COUNTER.reset(value)


def _generator(counter: Optional[SeedCounter]) -> np.random.Generator:
    c = counter if counter is not None else _DEFAULT_COUNTER
    return np.random.default_rng(c.next())


def normalized_random(mean: float, stddev: float, counter: Optional[SeedCounter] = None) -> float:
    """One normal sample via the sine branch of the Box-Muller transform.

    Consumes exactly one tick of ``counter``.
    """
    rng = _generator(counter)
    # random() is in [0, 1); flip it so log(u1) stays finite
    u1 = 1.0 - rng.random()
    u2 = rng.random()
    std_normal = math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2)
    return mean + stddev * std_normal


def random_site(position, count: int, counter: Optional[SeedCounter] = None,
                radial_mean: float = RADIAL_MEAN, radial_stddev: float = RADIAL_STDDEV) -> np.ndarray:
    """Scatter ``count`` points around ``position``.

    Each site sits at a half-normal distance ``|N(radial_mean, radial_stddev)|``
    in a uniformly drawn direction, consuming two counter ticks. Returns an
    array of shape (count, 2) in draw order.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    center = as_point(position)
    sites = np.empty((int(count), 2), dtype=np.float64)
    for i in range(int(count)):
        dist = abs(normalized_random(radial_mean, radial_stddev, counter))
        angle = 2.0 * math.pi * _generator(counter).random()
        sites[i, 0] = center[0] + dist * math.cos(angle)
        sites[i, 1] = center[1] + dist * math.sin(angle)
    return sites


class SiteSampler:
    """Random site sampler that owns its seed counter.

    Two samplers built from equal configs produce identical sequences and
    never disturb the process-wide counter.
    """

    def __init__(self, config: Optional[SamplingConfig] = None):
        self.config = config if config is not None else SamplingConfig()
        self.counter = SeedCounter(self.config.seed)

    def normalized_random(self, mean: float, stddev: float) -> float:
        return normalized_random(mean, stddev, self.counter)

    def random_site(self, position, count: int) -> np.ndarray:
        start = self.counter.value
        ticks = 2 * int(count)
        sites = random_site(position, count, self.counter,
                            radial_mean=self.config.radial_mean,
                            radial_stddev=self.config.radial_stddev)
        logger.debug("sampled %d sites around %s (%d seeds from %d)",
                     count, tuple(as_point(position)), ticks, start)
        return sites

    def reset(self) -> None:
        self.counter.reset(self.config.seed)
