"""Arithmetic on size hints: ``(lower, upper)`` pairs whose ``upper`` may be ``None``.

Values behave like machine-sized unsigned integers: lower bounds saturate at
:data:`USIZE_MAX` and upper bounds become ``None`` when they would overflow.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

USIZE_MAX = 2**64 - 1
U32_MAX = 2**32 - 1

SizeHint = Tuple[int, Optional[int]]


def _saturate(value: int) -> int:
    return min(max(value, 0), USIZE_MAX)


def _checked(value: int) -> Optional[int]:
    return value if 0 <= value <= USIZE_MAX else None


def _checked_pow(base: int, exp: int) -> Optional[int]:
    if exp == 0:
        return 1
    if base in (0, 1):
        return base
    if exp >= 64:
        return None
    return _checked(base**exp)


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Add two size hints."""
    low = _saturate(a[0] + b[0])
    high = _checked(a[1] + b[1]) if a[1] is not None and b[1] is not None else None
    return low, high


def add_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Add ``x`` to both bounds of a size hint."""
    low, high = sh
    return _saturate(low + x), (_checked(high + x) if high is not None else None)


def sub_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Subtract ``x`` from both bounds, never going below zero."""
    low, high = sh
    return max(low - x, 0), (max(high - x, 0) if high is not None else None)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """Multiply two size hints."""
    low = _saturate(a[0] * b[0])
    a_high, b_high = a[1], b[1]
    if a_high is not None and b_high is not None:
        high = _checked(a_high * b_high)
    elif a_high == 0 or b_high == 0:
        high = 0
    else:
        high = None
    return low, high


def mul_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Multiply both bounds of a size hint by ``x``."""
    low, high = sh
    return _saturate(low * x), (_checked(high * x) if high is not None else None)


def pow_scalar_base(base: int, exp: SizeHint) -> SizeHint:
    """Raise ``base`` to a size-hint exponent."""
    low_pow = _checked_pow(base, min(exp[0], U32_MAX))
    low = USIZE_MAX if low_pow is None else low_pow
    high = None
    if exp[1] is not None:
        high = _checked_pow(base, min(exp[1], U32_MAX))
    return low, high


def hint_max(a: SizeHint, b: SizeHint) -> SizeHint:
    """Return the bound-wise maximum of two size hints."""
    low = max(a[0], b[0])
    high = max(a[1], b[1]) if a[1] is not None and b[1] is not None else None
    return low, high


def hint_min(a: SizeHint, b: SizeHint) -> SizeHint:
    """Return the bound-wise minimum of two size hints."""
    low = min(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        high: Optional[int] = min(a[1], b[1])
    else:
        high = a[1] if a[1] is not None else b[1]
    return low, high


def size_hint_of(obj: Any) -> SizeHint:
    """Best known size hint for an iterable or iterator.

    Objects with a ``size_hint`` method report their own; sized objects and
    objects with ``__length_hint__`` are taken as exact; anything else is
    ``(0, None)``.
    """
    method = getattr(obj, "size_hint", None)
    if callable(method):
        return method()
    try:
        n = len(obj)
    except TypeError:
        pass
    else:
        return n, n
    length_hint = getattr(type(obj), "__length_hint__", None)
    if length_hint is not None:
        hint = length_hint(obj)
        if hint is not NotImplemented and hint >= 0:
            return hint, hint
    return 0, None