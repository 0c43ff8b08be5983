import dataclasses

import pytest

from minichain.transaction import Transaction


def test_to_string_concatenates_keys_and_amount():
    t = Transaction((3, 33), (7, 33), 5)
    assert t.to_string() == "3337335"


def test_zero_fields_contribute_nothing():
    t = Transaction((1, 2), (3, 4), 0)
    assert t.to_string() == "1234"


def test_fields_are_kept():
    t = Transaction((3, 33), (7, 55), 12)
    assert t.sender == (3, 33)
    assert t.recipient == (7, 55)
    assert t.amount == 12


def test_equal_transactions_compare_equal():
    assert Transaction((1, 9), (2, 9), 4) == Transaction((1, 9), (2, 9), 4)
    assert Transaction((1, 9), (2, 9), 4) != Transaction((1, 9), (2, 9), 5)


def test_transaction_is_immutable():
    t = Transaction((1, 9), (2, 9), 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        t.amount = 10
    assert t.amount == 4
    assert t.to_string() == "19294"


def test_to_string_depends_on_amount():
    a = Transaction((1, 9), (2, 9), 4).to_string()
    b = Transaction((1, 9), (2, 9), 6).to_string()
    assert a[:-1] == b[:-1]
    assert a[-1] == "4" and b[-1] == "6"