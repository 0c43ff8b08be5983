"""The interactive main menu of the blockchain simulator."""

from __future__ import annotations

import random
import re
import sys
from collections.abc import Sequence
from typing import Protocol, TextIO

from .network import Network
from .rsa import rsa_transform
from .strutil import string_to_number
from .transaction import PublicKey, Transaction

_INTEGER = re.compile(r"[+-]?\d+")

_MENU = (
    "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
    "            Main Menu              \n"
    "1.Add a node to the network\n"
    "2.Remove a node from the network\n"
    "3.Mine a block\n"
    "4.Make a transaction\n"
    "5.Show the whole chain\n"
    "6.Show block at a specific block index\n"
    "7.Quit\n"
    "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
)

_CHOICE_ERROR = (
    "!!!!!!!!!!!!!!!!!!!!! Error !!!!!!!!!!!!!!!!!!!!!!!\n"
    "Plesae do not enter anything but a number between 1 to 7 in order to "
    "choose an option from Main Menu\n"
    "!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!\n"
)

_DEFAULT_DIFFICULTY = 4


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class _TokenReader:
    """Reads whole lines or whitespace-separated integers from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: str | None = None

    def _next_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def read_line(self) -> str:
        """Return the rest of the current line, or the next whole line."""
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        return self._next_line()

    def read_int(self) -> int:
        """Return the next integer, skipping blank space and line ends."""
        while True:
            if self._pending is None:
                self._pending = self._next_line()
            text = self._pending.lstrip()
            if not text:
                self._pending = None
                continue
            match = _INTEGER.match(text)
            if match is None:
                self._pending = None
                raise ValueError(f"expected a whole number, got {text.split()[0]!r}")
            self._pending = text[match.end():]
            return int(match.group())

    def read_ints(self, count: int) -> list[int]:
        return [self.read_int() for _ in range(count)]

    def discard(self) -> None:
        self._pending = None


class MainMenu:
    """Prints the menu and carries out one chosen action per call to handle."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: _RandomSource | None = None,
    ) -> None:
        self._reader = _TokenReader(sys.stdin if stdin is None else stdin)
        self._out = sys.stdout if stdout is None else stdout
        self._rng = random.Random() if rng is None else rng

    def _write(self, text: str) -> None:
        self._out.write(text)

    def show(self) -> None:
        """Print the list of options."""
        self._write(_MENU)

    def _read_key(self) -> PublicKey:
        first, second = self._reader.read_ints(2)
        return (first, second)

    def _owns_key(self, key: PublicKey, owner: str) -> bool:
        """Challenge the user to sign three random numbers with ``key``'s private half."""
        self._write(
            f"Please encrypt below numbers with {owner} private key and enter "
            "result to ensure us entered public key is yours\n"
        )
        challenge = [self._rng.randint(1, key[1] - 1) for _ in range(3)]
        self._write(" ".join(str(n) for n in challenge) + "\n")
        self._write("Enter result of encryption: ")
        answer = self._reader.read_ints(3)
        self._reader.read_line()
        if rsa_transform(key[0], key[1], answer) != challenge:
            self._write(
                f"There is a problem with your encryption or {owner} private key\n\n"
            )
            return False
        return True

    def _add_node(self, network: Network) -> None:
        self._write("\n         Add a node to the network          \n")
        self._write("Please enter your valid base10 public key pair: ")
        key = self._read_key()
        if not self._owns_key(key, "your"):
            return
        if network.find_node(key):
            self._write(
                "There is another node in the network with the given public key\n\n"
            )
        else:
            network.add_node(key)
            self._write("Successfully added!\n\n")

    def _remove_node(self, network: Network) -> None:
        self._write("\n         Remove a node from the network          \n")
        self._write("Please enter your valid base10 public key pair: ")
        key = self._read_key()
        if not self._owns_key(key, "your"):
            return
        if not network.find_node(key):
            self._write(
                "There is not any stored node in the network with the given "
                "public key\n\n"
            )
        else:
            network.remove_node(key)
            self._write("Successfully Removed!\n\n")

    def _mine(self, network: Network) -> None:
        self._write("\n         Mine a block          \n")
        self._write(
            "Please enter difficulty of minning the block: (or just press enter "
            f"to set difficulty to {_DEFAULT_DIFFICULTY} by default) "
        )
        line = self._reader.read_line()
        difficulty = string_to_number(line) if line else _DEFAULT_DIFFICULTY
        self._write("Please enter miner's valid base10 public key pair: ")
        key = self._read_key()
        if not self._owns_key(key, "your"):
            return
        if not network.find_node(key):
            self._write(
                "There is not any stored node in the network with the given "
                "public key\n\n"
            )
        else:
            self._write(network.mine(key, difficulty))

    def _transaction(self, network: Network) -> None:
        self._write("\n         Make a transaction          \n")
        self._write("Please enter sender's valid base10 public key pair: ")
        sender = self._read_key()
        self._write("Please enter recipient's valid base10 public key pair: ")
        recipient = self._read_key()
        self._write("Please enter amount: ")
        amount = self._reader.read_int()
        if not self._owns_key(sender, "sender's"):
            return
        if not network.find_node(sender):
            self._write(
                "There is not any stored node in the network with the given "
                "sender's public key\n\n"
            )
        elif not network.find_node(recipient):
            self._write(
                "There is not any stored node in the network with the given "
                "recipient's public key\n\n"
            )
        else:
            network.add_transaction(Transaction(sender, recipient, amount))
            self._write("Transaction successfully made!\n\n")

    def _show_chain(self, network: Network) -> None:
        self._write("\n         Show the whole chain          \n")
        if network.is_empty():
            self._write("Unfortunately there is not any node in the network\n")
        else:
            self._write(network.first_node().blockchain.format_chain())

    def _show_block(self, network: Network) -> None:
        self._write("\n         Show block at a specific block index          \n")
        self._write("Please enter index of the block you want to see: ")
        index = self._reader.read_int()
        self._reader.read_line()
        self._write(network.first_node().blockchain.format_block(index))

    def handle(self, network: Network) -> bool:
        """Read one menu choice and carry it out; return True when asked to quit.

        Raises EOFError when the input runs out, ValueError when a number was
        expected but not given, and IndexError for a block or node that
        cannot exist.
        """
        line = self._reader.read_line()
        if len(line) > 1:
            self._write(_CHOICE_ERROR)
            return False
        actions = {
            "1": self._add_node,
            "2": self._remove_node,
            "3": self._mine,
            "4": self._transaction,
            "5": self._show_chain,
            "6": self._show_block,
        }
        if line == "7":
            self._write("\nProgram terminated successfully!\n")
            return True
        action = actions.get(line)
        if action is None:
            self._write(_CHOICE_ERROR)
        else:
            action(network)
        return False

    def discard_pending(self) -> None:
        """Drop whatever is left of the current input line."""
        self._reader.discard()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu on standard input and output until the user quits."""
    network = Network()
    menu = MainMenu()
    while True:
        menu.show()
        try:
            if menu.handle(network):
                return 0
        except EOFError:
            return 0
        except (ValueError, IndexError) as exc:
            menu.discard_pending()
            sys.stdout.write(f"Error: {exc}\n\n")


if __name__ == "__main__":
    sys.exit(main())