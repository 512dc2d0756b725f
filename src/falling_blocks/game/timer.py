from __future__ import annotations

from fractions import Fraction
from numbers import Rational
from typing import Union


Duration = Union[Fraction, int, float]


def as_fraction(value: Duration) -> Fraction:
    if isinstance(value, Rational):
        return Fraction(value)
    # Floats are converted exactly; limit the denominator so 0.2 means 1/5
    return Fraction(value).limit_denominator(1_000_000)


class FallTimer:
    """Repeating gravity timer.

    Durations are kept as exact fractions of a second so that dividing the
    period for a soft drop and multiplying it back restores it exactly.
    """

    def __init__(self, period: Duration = Fraction(1, 5), soft_drop_factor: int = 3) -> None:
        self.default_period = as_fraction(period)
        self.soft_drop_factor = soft_drop_factor
        self.period = self.default_period
        self.elapsed = Fraction(0)
        self.soft_drop_held = False

    def reset(self) -> None:
        self.period = self.default_period
        self.elapsed = Fraction(0)
        self.soft_drop_held = False

    def tick(self, delta: Duration) -> int:
        """Advance by ``delta`` seconds and return how many periods finished."""
        self.elapsed += as_fraction(delta)
        times, self.elapsed = divmod(self.elapsed, self.period)
        return int(times)

    def set_soft_drop(self, held: bool) -> None:
        # Only the press and release edges change the period
        if held == self.soft_drop_held:
            return
        self.soft_drop_held = held
        if held:
            self.period /= self.soft_drop_factor
        else:
            self.period *= self.soft_drop_factor
