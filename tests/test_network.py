import pytest

from minichain.network import Network
from minichain.transaction import Transaction

ALICE = (3, 33)
BOB = (7, 55)
CAROL = (5, 91)


@pytest.fixture
def network():
    net = Network()
    for key in (ALICE, BOB, CAROL):
        net.add_node(key)
    return net


def test_new_network_is_empty():
    net = Network()
    assert net.is_empty() is True
    with pytest.raises(IndexError):
        net.first_node()


def test_add_and_find(network):
    assert network.is_empty() is False
    assert network.find_node(BOB) is True
    assert network.find_node((1, 2)) is False
    assert network.first_node().public_key == ALICE


def test_remove_node(network):
    network.remove_node(BOB)
    assert network.find_node(BOB) is False
    assert [n.public_key for n in network.nodes] == [ALICE, CAROL]


def test_add_transaction_reaches_every_node(network):
    tx = Transaction(ALICE, BOB, 10)
    network.add_transaction(tx)
    assert all(node.mempool == [tx] for node in network.nodes)


def test_mine_adds_block_to_every_chain(network):
    tx = Transaction(ALICE, BOB, 10)
    network.add_transaction(tx)
    report = network.mine(BOB, 1)
    assert "Block verified by 2 Nodes.\n" in report
    assert report.endswith("Block verification successfully made!\n")
    assert all(len(node.blockchain) == 1 for node in network.nodes)
    assert all(node.mempool == [] for node in network.nodes)
    block = network.first_node().blockchain.last_block()
    assert block.transactions == (tx,)
    assert block.hash.startswith("0")
    assert f"block hash: {block.hash}" in report


def test_mine_report_names_miner(network):
    report = network.mine(BOB, 1)
    assert report.startswith("Block successfully mined by 7 55\n")


def test_mine_unknown_key_does_nothing(network):
    assert network.mine((1, 2), 1) == ""
    assert all(len(node.blockchain) == 0 for node in network.nodes)


def test_second_block_links_to_first(network):
    network.mine(ALICE, 1)
    network.mine(CAROL, 1)
    blocks = list(network.first_node().blockchain)
    assert len(blocks) == 2
    assert blocks[1].prev_hash == blocks[0].hash
    assert blocks[1].index == 1


def test_late_node_receives_existing_chain(network):
    network.mine(ALICE, 1)
    network.add_node((11, 143))
    late = network.nodes[-1]
    assert list(late.blockchain) == list(network.first_node().blockchain)


def test_single_node_network_accepts_own_block():
    net = Network()
    net.add_node(ALICE)
    report = net.mine(ALICE, 1)
    assert "Block verified by 0 Nodes.\n" in report
    assert len(net.first_node().blockchain) == 1