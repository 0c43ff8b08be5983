# minichain

A small, self-contained model of a proof-of-work blockchain network. It is
meant for learning how mining, block verification and consensus fit together.

Each node is identified by a textbook RSA public key `(e, n)`. Every node
keeps its own copy of the chain and its own mempool of pending transactions.
When a node mines a block, it takes up to three transactions from the front
of its mempool. It then counts the nonce up from 0 until the first
`difficulty` characters of the block's SHA-256 hex digest are all `0`. The
other nodes recompute the hash. If at least half of them (rounded down)
agree, the block is added to every node's chain.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The interactive network

```
minichain
```

This prints a menu and reads one choice per line:

1. Add a node to the network
2. Remove a node from the network
3. Mine a block. Press enter at the difficulty prompt to use the default of 4.
4. Make a transaction
5. Show the whole chain
6. Show the block at a given index
7. Quit

Whenever an action asks for a public key `e n`, the menu prints three random
numbers between 1 and `n - 1`. You then enter those numbers encrypted with
the matching private key. The menu raises each of your answers to the power
`e` modulo `n`. It goes ahead only if the three numbers it printed come back.

Chains are shown from the first node in the network. Block timestamps are
shown as an hour and minute 3½ hours ahead of UTC (Tehran time, with no
daylight saving). If you enter something that is not a whole number where
one is expected, or ask for a block when there are no nodes, the menu prints
an `Error:` line and shows itself again. The program ends when you choose 7
or when the input runs out.

## The RSA calculator

```
minichain-rsa
```

This reads a private key pair `d n` and three numbers from standard input.
It prints each number raised to the power `d` modulo `n`. Use it to answer
the menu's challenges. If the input does not start with five whole numbers,
it reports an error and exits with status 1.

## Using it as a library

```python
from minichain.network import Network
from minichain.transaction import Transaction

net = Network()
net.add_node((3, 33))
net.add_node((7, 33))
net.add_transaction(Transaction((3, 33), (7, 33), 10))
print(net.mine((3, 33), 2))  # the mining and consensus report

print(net.first_node().blockchain.format_chain())
```

The modules:

- `minichain.network`: `Network`, with `add_node`, `find_node`,
  `remove_node`, `add_transaction`, `mine`, `is_empty` and `first_node`.
  `mine` returns the report text; it does not print it.
- `minichain.node`: `Node`, with `add_to_mempool`, `mine` and
  `verify_block`, and `MAX_TRANSACTIONS_PER_BLOCK`.
- `minichain.chain`: `Block` (with `hash_input`), `Chain` (with
  `add_block`, `last_block`, `format_block`, `format_chain`, `len()` and
  iteration) and `tehran_time`.
- `minichain.transaction`: `Transaction(sender, recipient, amount)` with
  `to_string`.
- `minichain.rsa`: `rsa_transform(e, n, values)` raises each value to `e`
  modulo `n`.
- `minichain.digest`: `sha256_hex(text)` returns the SHA-256 digest as
  lower-case hex.
- `minichain.strutil`: the digit and character helpers used to build hash
  inputs.
- `minichain.menu` and `minichain.calculator`: the two commands.

## What it does not do

All nodes live in one process; nothing is sent over a network. Nothing is
saved, so the chain and the nodes are gone when the program ends. Only block
hashes are checked. Transactions are not checked against balances.