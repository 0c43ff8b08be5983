"""A set of nodes that share transactions and agree on mined blocks."""

from __future__ import annotations

from .node import Node
from .strutil import number_to_string
from .transaction import PublicKey, Transaction


class Network:
    """The nodes of the network, oldest first."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []

    def is_empty(self) -> bool:
        """Return True if the network has no nodes."""
        return not self.nodes

    def first_node(self) -> Node:
        """Return the oldest node; raises IndexError for an empty network."""
        if not self.nodes:
            raise IndexError("the network has no nodes")
        return self.nodes[0]

    def add_node(self, public_key: PublicKey) -> None:
        """Add a node that starts with a copy of the oldest node's chain."""
        first = self.nodes[0] if self.nodes else None
        self.nodes.append(Node(public_key, first))

    def find_node(self, public_key: PublicKey) -> bool:
        """Return True if a node with ``public_key`` is in the network."""
        key = tuple(public_key)
        return any(node.public_key == key for node in self.nodes)

    def remove_node(self, public_key: PublicKey) -> None:
        """Remove the nodes with ``public_key``."""
        key = tuple(public_key)
        self.nodes = [node for node in self.nodes if node.public_key != key]

    def add_transaction(self, transaction: Transaction) -> None:
        """Give every node a copy of the transaction."""
        for node in self.nodes:
            node.add_to_mempool(transaction)

    def mine(self, public_key: PublicKey, difficulty: int) -> str:
        """Let the node with ``public_key`` mine a block and seek consensus.

        When at least half of the other nodes verify the block it is added to
        every node's chain. Returns the report text; empty if no node has the key.
        """
        key = tuple(public_key)
        report: list[str] = []
        for miner in [node for node in self.nodes if node.public_key == key]:
            block = miner.mine(difficulty)
            report.append(
                f"Block successfully mined by {number_to_string(key[0])} "
                f"{number_to_string(key[1])}\nblock hash: {block.hash}\n\n"
            )
            verified = sum(
                node.verify_block(block) for node in self.nodes if node is not miner
            )
            report.append(f"Block verified by {verified} Nodes.\n")
            if verified >= (len(self.nodes) - 1) // 2:
                report.append("Block verification successfully made!\n")
                for node in self.nodes:
                    node.blockchain.add_block(block)
            else:
                report.append("Block verification was unsuccessful\n")
        return "".join(report)