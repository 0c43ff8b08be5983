"""Blocks and the chain that links them."""

from __future__ import annotations

import dataclasses
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .strutil import number_to_string
from .transaction import Transaction


def _now() -> int:
    return int(time.time())


@dataclass
class Block:
    """One block of the chain: its header fields and its transactions."""

    prev_hash: str
    index: int
    difficulty: int
    transactions: Iterable[Transaction] = ()
    timestamp: int = field(default_factory=_now)
    nonce: int = 0
    hash: str = ""

    def __post_init__(self) -> None:
        self.transactions = tuple(self.transactions)

    def hash_input(self) -> str:
        """Return the text whose SHA-256 digest is this block's hash."""
        header = (self.index, self.nonce, self.timestamp, self.difficulty)
        parts = [self.prev_hash, *(number_to_string(n) for n in header)]
        parts.extend(t.to_string() for t in self.transactions)
        return "".join(parts)


def tehran_time(timestamp: int) -> tuple[int, int]:
    """Return the (hour, minute) shown for ``timestamp`` in block listings.

    The UTC time is shifted by three and a half hours, carrying an hour
    whenever the UTC minute is 30 or more.
    """
    utc = time.gmtime(timestamp)
    shift = 5 if utc.tm_min >= 30 else 4
    return (utc.tm_hour + shift) % 24, (utc.tm_min + 30) % 60


class Chain:
    """An ordered sequence of blocks, the genesis block first."""

    def __init__(self) -> None:
        self._blocks: list[Block] = []

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def last_block(self) -> Block | None:
        """Return the newest block, or None for an empty chain."""
        return self._blocks[-1] if self._blocks else None

    def add_block(self, block: Block) -> None:
        """Append a copy of ``block`` to the chain."""
        self._blocks.append(dataclasses.replace(block))

    def format_block(self, index: int) -> str:
        """Describe the block at height ``index`` as printable text."""
        if index < 0:
            raise IndexError(f"block height must not be negative: {index}")
        if index >= len(self._blocks):
            return f"Unfortunatly there is not any block at height {index}\n"
        block = self._blocks[index]
        hour, minute = tehran_time(block.timestamp)
        lines = [
            f"Block #{index}",
            f"Hash: {block.hash}",
            f"Previous block hash: {block.prev_hash}",
            f"Index: {block.index}",
            f"Nonce: {block.nonce}",
            f"TimeStamp: {hour}:{minute}",
            f"Difficulty: {block.difficulty}",
            f"Number of transactions: {len(block.transactions)}",
        ]
        lines.extend(
            f"from ({t.sender[0]}, {t.sender[1]}) to "
            f"({t.recipient[0]}, {t.recipient[1]})   amount: {t.amount}"
            for t in block.transactions
        )
        return "".join(line + "\n" for line in lines)

    def format_chain(self) -> str:
        """Describe every block of the chain, oldest first."""
        return "".join(self.format_block(i) for i in range(len(self._blocks)))