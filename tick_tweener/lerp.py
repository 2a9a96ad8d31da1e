"""Interpolation strategies mapping (start, end, scaled progress) to a value."""
from __future__ import annotations

from typing import Any

from tick_tweener.types import Arithmetic, ArithmeticUnsupportedError

Vec = tuple[float, ...]


def _unsupported(value_type: type) -> ArithmeticUnsupportedError:
    return ArithmeticUnsupportedError(
        value_type,
        f"{value_type.__name__} does not support arithmetic; "
        "pass an explicit lerp function",
    )


def supports_arithmetic(value: Any) -> bool:
    """True if ``value`` defines ``+``, ``-`` and ``*``.

    Tuples and strings implement ``+`` and ``*`` as concatenation and
    repetition but lack ``-``, so they are rejected. Whether ``*`` accepts
    a float is only known by trying it; ``require_arithmetic`` does.
    """
    return isinstance(value, Arithmetic)


def require_arithmetic(start: Any, end: Any) -> None:
    """Raise ArithmeticUnsupportedError unless ``arithmetic_lerp`` works on the pair.

    Types such as ``Decimal`` define ``*`` but refuse a float scalar, so a
    zero-progress lerp is attempted after the operator check.
    """
    for value in (start, end):
        if not supports_arithmetic(value):
            raise _unsupported(type(value))
    arithmetic_lerp(start, end, 0.0)


def arithmetic_lerp(start: Any, end: Any, t: float) -> Any:
    try:
        return start + (end - start) * t
    except TypeError as exc:
        raise _unsupported(type(start)) from exc


def vec_lerp(start: Vec, end: Vec, t: float) -> Vec:
    return tuple(s + (e - s) * t for s, e in zip(start, end, strict=True))
