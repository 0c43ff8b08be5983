"""Textbook RSA exponentiation over plain integers."""

from __future__ import annotations

from collections.abc import Iterable


def _power_mod(value: int, e: int, n: int) -> int:
    if e <= 1:
        return value
    if n == 0:
        raise ZeroDivisionError("modulus must not be zero")
    magnitude = pow(abs(value), e, abs(n))
    # Remainders keep the sign of the dividend, so a negative base stays
    # negative for odd exponents.
    return -magnitude if value < 0 and e % 2 else magnitude


def rsa_transform(e: int, n: int, values: Iterable[int]) -> list[int]:
    """Raise every value to the power ``e`` modulo ``n``.

    With ``e`` of 1 or less the values are returned unchanged. A zero
    modulus raises ZeroDivisionError.
    """
    return [_power_mod(value, e, n) for value in values]