"""Easing functions for tween interpolation.

An easing function maps normalized progress (0..1) to scaled progress.
Results are not clamped, so overshooting curves may leave [0, 1].
"""
from __future__ import annotations

from dataclasses import dataclass

from tick_tweener.types import EaseFn


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EASINGS: dict[str, EaseFn] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def resolve_easing(easing: EaseFn | str) -> EaseFn:
    """Return the easing function for a callable or a registered name."""
    if isinstance(easing, str):
        fn = EASINGS.get(easing)
        if fn is None:
            known = ", ".join(sorted(EASINGS))
            raise ValueError(f"Unknown easing {easing!r} (known: {known})")
        return fn
    if not callable(easing):
        raise TypeError(f"easing must be callable or a name, got {easing!r}")
    return easing


def _mirror(fn: EaseFn) -> EaseFn:
    def mirrored(t: float) -> float:
        return 1 - fn(1 - t)

    mirrored.__name__ = f"mirrored_{getattr(fn, '__name__', 'ease')}"
    mirrored.__qualname__ = mirrored.__name__
    return mirrored


def _join(first: EaseFn, second: EaseFn) -> EaseFn:
    def joined(t: float) -> float:
        if t < 0.5:
            return first(t * 2) / 2
        return 0.5 + second(t * 2 - 1) / 2

    joined.__name__ = f"joined_{getattr(first, '__name__', 'ease')}"
    joined.__qualname__ = joined.__name__
    return joined


@dataclass(frozen=True)
class EaseSet:
    """The in, out and in-out variants of one easing curve.

    Attributes:
        in_: Curve that starts slow.
        out: Curve that ends slow.
        in_out: ``in_`` over the first half, ``out`` over the second.
    """

    in_: EaseFn
    out: EaseFn
    in_out: EaseFn

    @classmethod
    def from_in(cls, fn: EaseFn) -> EaseSet:
        out = _mirror(fn)
        return cls(in_=fn, out=out, in_out=_join(fn, out))

    @classmethod
    def from_out(cls, fn: EaseFn) -> EaseSet:
        in_ = _mirror(fn)
        return cls(in_=in_, out=fn, in_out=_join(in_, fn))
