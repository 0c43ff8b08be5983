"""Small string helpers used to build hash inputs and parse menu input."""

from __future__ import annotations

_ZERO = ord("0")


def string_to_number(text: str) -> int:
    """Read ``text`` as a base-10 number, digit by digit from the right.

    Each character contributes ``(code - code('0')) * 10**position``; an
    empty string gives 0. No validation is done on the characters.
    """
    return sum(
        (ord(ch) - _ZERO) * 10**power for power, ch in enumerate(reversed(text))
    )


def number_to_string(n: int) -> str:
    """Write ``n`` in base 10 without any leading sign.

    Zero gives an empty string. Negative numbers follow truncating division,
    so their digits come out as the characters just below ``'0'``.
    """
    chars: list[str] = []
    while n:
        magnitude_digit = abs(n) % 10
        digit = -magnitude_digit if n < 0 else magnitude_digit
        chars.append(chr(_ZERO + digit))
        n = -(abs(n) // 10) if n < 0 else n // 10
    return "".join(reversed(chars))


def is_all_zero(text: str) -> bool:
    """Return True if every character of ``text`` is ``'0'`` (True when empty)."""
    return all(ch == "0" for ch in text)


def is_all_letters(text: str) -> bool:
    """Return True if ``text`` holds only ASCII letters and spaces."""
    return all(("A" <= ch <= "Z") or ("a" <= ch <= "z") or ch == " " for ch in text)


def make_lower(c: str) -> str:
    """Lower-case an upper-case letter strictly between ``'A'`` and ``'Z'``.

    ``'A'`` and ``'Z'`` themselves, and every other character, come back as is.
    """
    if "A" < c < "Z":
        return chr(ord(c) - ord("A") + ord("a"))
    return c


def contains(haystack: str, needle: str) -> bool:
    """Return True if ``needle`` occurs in ``haystack``."""
    return needle in haystack