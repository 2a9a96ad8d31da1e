"""Tween strategy configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from tick_tweener.easing import linear, resolve_easing
from tick_tweener.lerp import arithmetic_lerp
from tick_tweener.tweener import Tweener
from tick_tweener.types import EaseFn, LerpFn


@dataclass(frozen=True)
class TweenConfig:
    """Immutable easing/lerp preset shared by many tweeners.

    Attributes:
        easing: Easing function, or the name of one in ``EASINGS``.
        lerp: Interpolation function. The default requires the tweened
            values to support arithmetic.
    """

    easing: EaseFn | str = linear
    lerp: LerpFn[Any] = arithmetic_lerp

    def __post_init__(self) -> None:
        resolve_easing(self.easing)
        if not callable(self.lerp):
            raise TypeError(f"lerp must be callable, got {self.lerp!r}")

    def build(self, start: Any, end: Any, duration: float | timedelta) -> Tweener[Any]:
        return Tweener(start, end, duration, easing=self.easing, lerp=self.lerp)
