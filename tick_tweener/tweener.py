"""Tweener: time-stepped interpolation between two values.

The host drives a tweener by calling ``update(dt)`` once per frame and reads
``value`` afterwards. When the accumulated time reaches ``duration`` the
value snaps to ``end`` exactly, the tweener stops and every ``on_end``
handler is called once.

Example::

    tweener = Tweener(0.0, 10.0, 2.0, easing="ease_out")
    tweener.on_end(lambda tw: print("arrived at", tw.value))
    while tweener.running:
        tweener.update(dt)
"""
from __future__ import annotations

import math
import sys
from datetime import timedelta
from typing import Any, Callable, Generic

from tick_tweener.easing import linear, resolve_easing
from tick_tweener.lerp import arithmetic_lerp, require_arithmetic
from tick_tweener.types import EaseFn, LerpFn, T

EndHandler = Callable[["Tweener[Any]"], None]


def _to_seconds(duration: float | timedelta) -> float:
    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()
    else:
        seconds = float(duration)
    if not math.isfinite(seconds) or seconds <= 0:
        raise ValueError(f"duration must be positive and finite, got {duration!r}")
    return seconds


def _strategy_name(fn: Callable[..., Any]) -> str:
    module = getattr(fn, "__module__", None)
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name is None:
        return repr(fn)
    if module is None:
        return name
    return f"{module}.{name}"


class Tweener(Generic[T]):
    """Interpolates from ``start`` to ``end`` over ``duration`` seconds.

    Args:
        start: Value at progress 0.
        end: Value at progress 1.
        duration: Positive seconds (float) or a ``timedelta``.
        easing: Easing function or a name registered in ``EASINGS``.
        lerp: Interpolation function. The default computes
            ``start + (end - start) * t`` and requires both values to
            support that arithmetic.

    Raises:
        ValueError: duration is not positive and finite, or the easing name
            is unknown.
        ArithmeticUnsupportedError: the default lerp is used with values
            that lack ``+``, ``-`` or scalar ``*``.
    """

    def __init__(
        self,
        start: T,
        end: T,
        duration: float | timedelta,
        easing: EaseFn | str = linear,
        lerp: LerpFn[T] = arithmetic_lerp,
    ) -> None:
        self._duration = _to_seconds(duration)
        self._easing = resolve_easing(easing)
        if not callable(lerp):
            raise TypeError(f"lerp must be callable, got {lerp!r}")
        if lerp is arithmetic_lerp:
            require_arithmetic(start, end)
        self._lerp = lerp
        self._start = start
        self._end = end
        self._elapsed = 0.0
        self._value = start
        self._running = True
        self._on_end: list[EndHandler] = []

    # -- read surface --

    @property
    def value(self) -> T:
        return self._value

    @property
    def running(self) -> bool:
        return self._running

    @property
    def start_value(self) -> T:
        return self._start

    @property
    def end_value(self) -> T:
        return self._end

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def easing(self) -> EaseFn:
        return self._easing

    @property
    def lerp(self) -> LerpFn[T]:
        return self._lerp

    @property
    def progress(self) -> float:
        return self._elapsed / self._duration

    @property
    def finished(self) -> bool:
        return self._elapsed >= self._duration

    # -- completion handlers --

    def on_end(self, handler: EndHandler) -> None:
        """Register a handler called with this tweener on natural completion.

        Handlers run in registration order. ``stop()`` never triggers them.
        """
        self._on_end.append(handler)

    def off_end(self, handler: EndHandler) -> None:
        try:
            self._on_end.remove(handler)
        except ValueError:
            pass

    # -- time --

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds. No-op while stopped."""
        if not dt >= 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if not self._running:
            return

        self._elapsed += dt

        if self._elapsed >= self._duration:
            self._elapsed = self._duration
            self._value = self._end
            self._running = False
            self._fire_on_end()
            return

        scaled = self._easing(self._elapsed / self._duration)
        self._value = self._lerp(self._start, self._end, scaled)

    def _fire_on_end(self) -> None:
        # Copy so handlers may register or remove handlers while we iterate.
        for handler in list(self._on_end):
            try:
                handler(self)
            except Exception:
                print(
                    f"tick-tweener: on_end handler error: {sys.exc_info()[1]}",
                    file=sys.stderr,
                )

    # -- control --

    def start(self) -> None:
        """Resume updating. Elapsed time is left as is."""
        self._running = True

    def stop(self) -> None:
        """Halt updating without firing ``on_end`` handlers."""
        self._running = False

    def reset(self) -> None:
        """Move back to the beginning: elapsed 0, value ``start``."""
        self._elapsed = 0.0
        self._value = self._start

    def reset_to(self, to: T) -> None:
        """Head for ``to``, starting from the current value."""
        self._elapsed = 0.0
        self._start = self._value
        self._end = to

    def reverse(self) -> None:
        """Swap start and end and rewind. ``value`` changes on next update."""
        self._elapsed = 0.0
        self._start, self._end = self._end, self._start

    # -- diagnostics --

    def __str__(self) -> str:
        return (
            f"{_strategy_name(self._easing)}.\n"
            f"{_strategy_name(self._lerp)}.\n"
            f"Tween {self._start} -> {self._end} in {self._duration:g}s. "
            f"elapsed {self._elapsed:.2f}s"
        )

    def __repr__(self) -> str:
        return (
            f"Tweener(start={self._start!r}, end={self._end!r}, "
            f"duration={self._duration!r}, elapsed={self._elapsed!r}, "
            f"value={self._value!r}, running={self._running!r})"
        )
