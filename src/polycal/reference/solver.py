"""
polycal.reference.solver
------------------------
Bounded Newton iteration for "when does this longitude reach a target".

The derivative is a one-day forward difference of the longitude itself, so
the same routine serves the Sun (about 1 deg/day) and the Moon-Sun
elongation (about 12 deg/day) without per-body rate tables.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from ..core.config import SolverConfig
from .astro_args import wrap180

LOG = logging.getLogger(__name__)

LongitudeFn = Callable[[float], float]


def solve_longitude(
    f: LongitudeFn,
    *,
    seed: float,
    target_deg: float,
    fallback_step: float,
    fallback_rate: Optional[float] = None,
    config: SolverConfig = SolverConfig(),
) -> float:
    """
    Find t near `seed` with f(t) == target_deg (mod 360).

    f takes a JD and returns degrees. Each iteration steps by
    -error/rate, where rate is f(t+1) - f(t) wrapped to ±180. When the rate
    is flat (|rate| <= min_rate) the step goes towards the target instead:
    |error| / fallback_rate days when a nominal rate is given, never more
    than fallback_step, otherwise fallback_step itself. Iteration stops once
    |error| < tolerance_deg or the step is shorter than step_tolerance_days; after max_iterations the last
    estimate is returned as is.
    """
    t = seed
    for _ in range(config.max_iterations):
        ft = f(t)
        err = wrap180(ft - target_deg)
        rate = wrap180(f(t + 1.0) - ft)
        if abs(rate) <= config.min_rate:
            if abs(err) < config.tolerance_deg:
                return t
            size = fallback_step
            if fallback_rate:
                size = min(abs(err) / fallback_rate, fallback_step)
            step = -math.copysign(size, err)
        else:
            step = -err / rate
        t += step
        if abs(err) < config.tolerance_deg or abs(step) < config.step_tolerance_days:
            return t
    LOG.debug(
        "longitude solver stopped after %d iterations (target %.3f deg, seed %.5f, last %.5f)",
        config.max_iterations, target_deg, seed, t,
    )
    return t
