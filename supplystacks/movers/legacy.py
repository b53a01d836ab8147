"""Mover reproducing the historical replay: one crate fewer than requested."""

from __future__ import annotations

from supplystacks.engine import MoveCommand, Stacks
from supplystacks.movers.base import Mover, pop_up_to


class LegacyMover(Mover):
    """
    Moves ``count - 1`` crates as a block.

    ``move 3 from 5 to 2`` lifts the top two crates of column 5 and sets them
    on column 2 in the same order. ``move 1 ...`` (and ``move 0 ...``) is a
    no-op.
    """

    name = "legacy"

    def crates_to_move(self, cmd: MoveCommand) -> int:
        return max(cmd.count - 1, 0)

    def apply(self, stacks: Stacks, cmd: MoveCommand) -> int:
        popped = pop_up_to(stacks[cmd.source - 1], self.crates_to_move(cmd))
        stacks[cmd.destination - 1].extend(reversed(popped))
        return len(popped)
