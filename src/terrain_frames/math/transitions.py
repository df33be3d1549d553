"""Per-frame value sequences for animating render parameters."""
from __future__ import annotations

import math
import numbers
from typing import List, Union

import numpy as np

from ..errors import InvalidArgument
from ..models.transition import Easing


def progress(steps: int) -> np.ndarray:
    """Return ``steps`` evenly spaced progress values from 0 to 1 inclusive.

    A single step has progress 0.
    """
    if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
        raise InvalidArgument(f"steps must be an integer, got {steps!r}")
    if steps <= 0:
        raise InvalidArgument(f"steps must be positive, got {steps}")
    if steps == 1:
        return np.zeros(1, dtype=np.float64)
    return np.linspace(0.0, 1.0, int(steps), dtype=np.float64)


def easing_weights(p: np.ndarray, easing: Union[Easing, str], one_way: bool) -> np.ndarray:
    """Map progress values onto interpolation weights in ``[0, 1]``.

    One-way sweeps reach weight 1 at ``p == 1``. Round trips peak at ``p == 0.5``
    and return to 0, so the last frame joins the first of the next loop.
    """
    easing = Easing.parse(easing)
    p = np.asarray(p, dtype=np.float64)
    if easing is Easing.COSINE:
        period = math.pi if one_way else 2.0 * math.pi
        return (1.0 - np.cos(p * period)) / 2.0
    if one_way:
        return p
    return 1.0 - np.abs((2.0 * p) - 1.0)


def generate_transition(
    start: float,
    end: float,
    steps: int,
    one_way: bool = False,
    easing: Union[Easing, str] = Easing.COSINE,
) -> List[float]:
    """Interpolate ``steps`` frame values between ``start`` and ``end``.

    Parameters
    ----------
    start, end:
        Values at weight 0 and weight 1.
    steps:
        Number of frames, at least one.
    one_way:
        Sweep only from ``start`` to ``end`` instead of there and back.
    easing:
        ``Easing.LINEAR`` or ``Easing.COSINE`` (or their names).

    Raises
    ------
    InvalidArgument
        If ``steps`` is not a positive integer, the easing is unknown, or an
        endpoint is not finite.
    """
    if not (math.isfinite(start) and math.isfinite(end)):
        raise InvalidArgument(f"Transition endpoints must be finite, got {start} -> {end}")
    if not math.isfinite(end - start):
        raise InvalidArgument(f"Transition range {start} -> {end} overflows a float")
    weights = easing_weights(progress(steps), easing, one_way)
    values = start + (end - start) * weights
    return [float(v) for v in values]
