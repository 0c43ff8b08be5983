"""Transfers of an amount between two public keys."""

from __future__ import annotations

from dataclasses import dataclass

from .strutil import number_to_string

PublicKey = tuple[int, int]


@dataclass(frozen=True)
class Transaction:
    """A transfer of ``amount`` from ``sender`` to ``recipient``."""

    sender: PublicKey
    recipient: PublicKey
    amount: int

    def to_string(self) -> str:
        """Return the text that stands for this transaction in a block hash."""
        numbers = (*self.sender, *self.recipient, self.amount)
        return "".join(number_to_string(n) for n in numbers)