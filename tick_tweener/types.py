"""Shared type aliases, protocols and errors for tick-tweener."""
from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

EaseFn = Callable[[float], float]
LerpFn = Callable[[T, T, float], T]


@runtime_checkable
class Arithmetic(Protocol):
    """Values that can be interpolated without an explicit lerp function.

    ``a + b`` and ``a - b`` must yield the same type, ``a * s`` scales by a
    float.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, scalar: float) -> Any: ...


class ArithmeticUnsupportedError(TypeError):
    """Raised when the default lerp is used with a type lacking arithmetic."""

    def __init__(self, value_type: type, message: str) -> None:
        self.value_type = value_type
        super().__init__(message)
