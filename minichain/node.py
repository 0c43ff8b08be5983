"""A participant of the network: its chain, its key and its memory pool."""

from __future__ import annotations

from .chain import Block, Chain
from .digest import sha256_hex
from .strutil import is_all_zero
from .transaction import PublicKey, Transaction

MAX_TRANSACTIONS_PER_BLOCK = 3


def _meets_difficulty(digest: str, difficulty: int) -> bool:
    prefix = digest if difficulty < 0 else digest[:difficulty]
    return is_all_zero(prefix)


class Node:
    """A node identified by its public key, holding a copy of the chain."""

    def __init__(self, public_key: PublicKey, first_node: Node | None = None) -> None:
        self.public_key: PublicKey = tuple(public_key)
        self.blockchain = Chain()
        self.mempool: list[Transaction] = []
        if first_node is not None:
            for block in first_node.blockchain:
                self.blockchain.add_block(block)

    def add_to_mempool(self, transaction: Transaction) -> None:
        """Queue a transaction for a future block."""
        self.mempool.append(transaction)

    def mine(self, difficulty: int) -> Block:
        """Build a block from the memory pool and search for a valid nonce.

        The hash must begin with ``difficulty`` zero characters. The mined
        transactions leave the memory pool.
        """
        last = self.blockchain.last_block()
        prev_hash = "" if last is None else last.hash
        transactions = self.mempool[:MAX_TRANSACTIONS_PER_BLOCK]
        block = Block(prev_hash, len(self.blockchain), difficulty, transactions)

        digest = sha256_hex(block.hash_input())
        while not _meets_difficulty(digest, difficulty):
            block.nonce += 1
            digest = sha256_hex(block.hash_input())

        del self.mempool[: len(block.transactions)]
        block.hash = digest
        return block

    def verify_block(self, block: Block) -> bool:
        """Check the block's hash; on success drop its transactions from the pool."""
        if sha256_hex(block.hash_input()) != block.hash:
            return False
        del self.mempool[: len(block.transactions)]
        return True