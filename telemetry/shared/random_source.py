"""
Bounded Random Values

Every generator draws from a RandomValueService handle passed in by the
caller. One handle may be shared across threads; draws are serialised on
an internal lock so the underlying generator state is never corrupted.

Values are not cryptographically strong. Pass a seed to get a repeatable
sequence (tests), or leave it out for a fresh source.
"""

import random
import threading
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

HEX_DIGITS = "0123456789abcdef"


class RandomValueService:
    """Ranged doubles, ranged ints, categorical picks, hex strings and booleans."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def ranged_double(self, minimum: float, maximum: float) -> float:
        """Uniform float in [minimum, maximum)"""
        with self._lock:
            return minimum + self._random.random() * (maximum - minimum)

    def ranged_int(self, bound: int) -> int:
        """Uniform int in [0, bound)"""
        with self._lock:
            return self._random.randrange(bound)

    def pick(self, choices: Sequence[T]) -> T:
        """Uniform choice over an ordered sequence"""
        with self._lock:
            return self._random.choice(choices)

    def hex_string(self, length: int, upper: bool = False) -> str:
        """Hex string with each digit drawn independently"""
        with self._lock:
            digits = ''.join(self._random.choice(HEX_DIGITS) for _ in range(length))
        return digits.upper() if upper else digits

    def boolean(self) -> bool:
        with self._lock:
            return self._random.random() < 0.5

    def latitude(self) -> float:
        """Latitude in [-90, 90)"""
        return self.ranged_double(-90.0, 90.0)

    def longitude(self) -> float:
        """Longitude in [-180, 180)"""
        return self.ranged_double(-180.0, 180.0)
