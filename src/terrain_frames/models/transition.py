"""Animation transition models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from ..errors import InvalidArgument


class Easing(Enum):
    """Maps normalised progress onto an interpolation weight."""

    LINEAR = "linear"
    COSINE = "cosine"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["Easing", str]) -> "Easing":
        """Accept an ``Easing`` member, its value, or the short ``lin``/``cos`` aliases."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        aliases = {"lin": cls.LINEAR, "cos": cls.COSINE}
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError as exc:
            raise InvalidArgument(f"Unknown easing {value!r}; expected 'linear' or 'cosine'") from exc


@dataclass(slots=True, frozen=True)
class TransitionSpec:
    """Parameters of a single animated value sweep."""

    start: float
    end: float
    steps: int
    one_way: bool = False
    easing: Easing = Easing.COSINE

    def values(self) -> List[float]:
        from ..math.transitions import generate_transition

        return generate_transition(
            self.start,
            self.end,
            self.steps,
            one_way=self.one_way,
            easing=self.easing,
        )
