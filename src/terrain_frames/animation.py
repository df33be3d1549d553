"""Frame schedules combining several animated render parameters."""
from __future__ import annotations

import numbers
from typing import Dict, List, Union

import numpy as np
from loguru import logger

from .errors import InvalidArgument
from .math.transitions import generate_transition
from .models.transition import Easing


class FrameSchedule:
    """Named per-frame parameter tracks of equal length.

    Typical tracks are camera ``theta``/``phi``, ``zoom`` and ``water_depth``;
    each frame of the rendered animation reads one value from every track.
    """

    def __init__(self, n_frames: int) -> None:
        if isinstance(n_frames, bool) or not isinstance(n_frames, numbers.Integral):
            raise InvalidArgument(f"n_frames must be an integer, got {n_frames!r}")
        if n_frames <= 0:
            raise InvalidArgument(f"n_frames must be positive, got {n_frames}")
        self.n_frames = int(n_frames)
        self._tracks: Dict[str, List[float]] = {}

    @property
    def names(self) -> List[str]:
        return list(self._tracks)

    def __len__(self) -> int:
        return self.n_frames

    def __contains__(self, name: str) -> bool:
        return name in self._tracks

    def track(self, name: str) -> List[float]:
        return list(self._tracks[name])

    def _add(self, name: str, values: List[float]) -> "FrameSchedule":
        if name in self._tracks:
            raise InvalidArgument(f"Track {name!r} is already defined")
        self._tracks[name] = values
        logger.debug("Added track {} ({} frames, {} -> {})", name, len(values), values[0], values[-1])
        return self

    def add_transition(
        self,
        name: str,
        start: float,
        end: float,
        one_way: bool = False,
        easing: Union[Easing, str] = Easing.COSINE,
    ) -> "FrameSchedule":
        """Add a track sweeping from ``start`` to ``end`` over every frame."""
        values = generate_transition(start, end, self.n_frames, one_way=one_way, easing=easing)
        return self._add(name, values)

    def add_constant(self, name: str, value: float) -> "FrameSchedule":
        return self._add(name, [float(value)] * self.n_frames)

    def frames(self) -> List[Dict[str, float]]:
        """Return one ``{track: value}`` mapping per frame."""
        return [
            {name: values[index] for name, values in self._tracks.items()}
            for index in range(self.n_frames)
        ]

    def as_array(self) -> np.ndarray:
        """Return an ``(n_frames, n_tracks)`` array with columns ordered as :attr:`names`."""
        if not self._tracks:
            return np.empty((self.n_frames, 0), dtype=np.float64)
        return np.column_stack([np.asarray(v, dtype=np.float64) for v in self._tracks.values()])


def frame_filename(index: int, prefix: str = "frame", digits: int = 3, suffix: str = ".png") -> str:
    """Return a zero-padded, 1-based frame file name such as ``frame001.png``."""
    if index < 0:
        raise InvalidArgument(f"Frame index must be non-negative, got {index}")
    return f"{prefix}{index + 1:0{digits}d}{suffix}"
