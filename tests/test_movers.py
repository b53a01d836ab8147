import pytest

from supplystacks.engine import Crate, MoveCommand, replay
from supplystacks.movers import BlockMover, LegacyMover, SingleCrateMover, build_mover
from supplystacks.movers.base import pop_up_to


def crates(labels):
    return [Crate(c) for c in labels]


def test_pop_up_to_stops_on_empty_column():
    column = crates("AB")
    assert pop_up_to(column, 5) == crates("BA")
    assert column == []


def test_legacy_mover_counts_one_fewer():
    mover = LegacyMover()
    assert mover.crates_to_move(MoveCommand(3, 1, 2)) == 2
    assert mover.crates_to_move(MoveCommand(0, 1, 2)) == 0


def test_block_mover_keeps_order():
    stacks = [crates("ABC"), crates("X")]
    moved = BlockMover().apply(stacks, MoveCommand(2, 1, 2))
    assert moved == 2
    assert stacks == [crates("A"), crates("XBC")]


def test_single_crate_mover_reverses_order():
    stacks = [crates("ABC"), crates("X")]
    moved = SingleCrateMover().apply(stacks, MoveCommand(2, 1, 2))
    assert moved == 2
    assert stacks == [crates("A"), crates("XCB")]


def test_single_crate_mover_underflow():
    stacks = [crates("A"), []]
    assert SingleCrateMover().apply(stacks, MoveCommand(3, 1, 2)) == 1
    assert stacks == [[], crates("A")]


def test_movers_differ_on_same_instructions():
    commands = [MoveCommand(2, 1, 2), MoveCommand(1, 2, 1)]
    results = {}
    for name in ("legacy", "block", "single"):
        stacks = [crates("ABC"), crates("X")]
        replay(stacks, commands, build_mover(name))
        results[name] = stacks
    assert results["legacy"] == [crates("AB"), crates("XC")]
    assert results["block"] == [crates("AC"), crates("XB")]
    assert results["single"] == [crates("AB"), crates("XC")]


def test_build_mover_names():
    assert isinstance(build_mover("legacy"), LegacyMover)
    assert isinstance(build_mover("block"), BlockMover)
    assert isinstance(build_mover("single"), SingleCrateMover)
    with pytest.raises(ValueError):
        build_mover("crane")
