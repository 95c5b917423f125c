"""
Neighbour-selection policies for the moving window.

Two mutually exclusive modes:
- FixedCount(k): the k geographically nearest other sites.
- Radius(threshold): every other site within ``threshold`` distance units.
"""
from __future__ import annotations
import math
import numbers
from dataclasses import dataclass
from typing import Optional, Union

from .exceptions import InvalidParameter, InvalidPolicy


@dataclass(frozen=True)
class FixedCount:
    k: int

    def __post_init__(self):
        if isinstance(self.k, bool) or not isinstance(self.k, numbers.Integral):
            raise InvalidParameter(f"k must be a positive integer, got {self.k!r}.")
        if self.k < 1:
            raise InvalidParameter(f"k must be >= 1, got {self.k}.")

    def validate(self, n: int) -> None:
        """Check ``k`` against the number of sites ``n``."""
        if self.k > n - 1:
            raise InvalidParameter(
                f"k must be <= n-1 = {n - 1} for {n} sites, got {self.k}."
            )

    @property
    def label(self) -> str:
        return f"k{self.k}"


@dataclass(frozen=True)
class Radius:
    threshold: float

    def __post_init__(self):
        t = self.threshold
        if isinstance(t, bool) or not isinstance(t, numbers.Real) or math.isnan(t):
            raise InvalidParameter(f"radius must be a non-negative number, got {t!r}.")
        if t < 0:
            raise InvalidParameter(f"radius must be >= 0, got {t}.")

    def validate(self, n: int) -> None:
        # any non-negative radius is valid for any number of sites
        return None

    @property
    def label(self) -> str:
        t = float(self.threshold)
        short = f"{t:g}"
        # :g keeps six significant figures; fall back to repr when that loses digits
        return f"r{short}" if float(short) == t else f"r{t!r}"


Policy = Union[FixedCount, Radius]


def policy_from_args(k: Optional[int] = None, radius: Optional[float] = None) -> Policy:
    """Build a policy from the two optional arguments; exactly one must be given."""
    if k is not None and radius is not None:
        raise InvalidPolicy("Supply either k or radius, not both.")
    if k is None and radius is None:
        raise InvalidPolicy("Supply one of k or radius.")
    if k is not None:
        return FixedCount(k)
    return Radius(radius)
