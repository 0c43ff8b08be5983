"""A command that signs three numbers with a private key."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .rsa import rsa_transform


def main(argv: Sequence[str] | None = None) -> int:
    """Read a private key pair and three numbers, then print their RSA transform."""
    sys.stdout.write("Please enter your valid private key pair: ")
    sys.stdout.write("Please enter three numbers to start encryption process: ")
    tokens = sys.stdin.read().split()
    try:
        exponent, modulus, *numbers = (int(token) for token in tokens[:5])
    except ValueError:
        sys.stderr.write("\nexpected five whole numbers\n")
        return 1
    if len(numbers) != 3:
        sys.stderr.write("\nexpected five whole numbers\n")
        return 1
    result = rsa_transform(exponent, modulus, numbers)
    sys.stdout.write("Result: " + " ".join(str(n) for n in result) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())