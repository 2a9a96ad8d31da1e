"""tick-tweener - Time-stepped value interpolation with pluggable easing."""
from __future__ import annotations

from tick_tweener.config import TweenConfig
from tick_tweener.easing import EASINGS, EaseSet, linear, resolve_easing
from tick_tweener.lerp import arithmetic_lerp, supports_arithmetic, vec_lerp
from tick_tweener.tweener import Tweener
from tick_tweener.types import Arithmetic, ArithmeticUnsupportedError, EaseFn, LerpFn

__all__ = [
    "Tweener",
    "TweenConfig",
    "EASINGS",
    "EaseSet",
    "linear",
    "resolve_easing",
    "arithmetic_lerp",
    "supports_arithmetic",
    "vec_lerp",
    "Arithmetic",
    "ArithmeticUnsupportedError",
    "EaseFn",
    "LerpFn",
]
