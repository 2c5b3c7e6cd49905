"""Checked unsigned integer arithmetic at a fixed bit width.

Python ints never wrap, so every helper range-checks its result against
[0, 2**bits - 1] and raises NumericOverflow instead of returning a value
that would not fit in the on-chain integer type. Values are never
saturated or silently truncated.
"""

from __future__ import annotations

from mmm.errors import NumericOverflow


def _max_for(bits: int) -> int:
    return (1 << bits) - 1


def _ensure(value: int, bits: int, op: str) -> int:
    if value < 0 or value > _max_for(bits):
        raise NumericOverflow(f"u{bits} {op} out of range: {value}")
    return value


def narrow(value: int, bits: int = 64) -> int:
    """Narrow a (possibly wider) value to u{bits}, failing if it does not fit."""
    return _ensure(value, bits, "narrow")


def checked_add(a: int, b: int, bits: int = 64) -> int:
    _ensure(a, bits, "add operand")
    _ensure(b, bits, "add operand")
    return _ensure(a + b, bits, "add")


def checked_sub(a: int, b: int, bits: int = 64) -> int:
    _ensure(a, bits, "sub operand")
    _ensure(b, bits, "sub operand")
    return _ensure(a - b, bits, "sub")


def checked_mul(a: int, b: int, bits: int = 64) -> int:
    _ensure(a, bits, "mul operand")
    _ensure(b, bits, "mul operand")
    return _ensure(a * b, bits, "mul")


def checked_div(a: int, b: int, bits: int = 64) -> int:
    """Floor division; a zero divisor is reported as NumericOverflow."""
    _ensure(a, bits, "div operand")
    _ensure(b, bits, "div operand")
    if b == 0:
        raise NumericOverflow(f"u{bits} div by zero")
    return a // b
