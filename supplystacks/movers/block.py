"""Mover that lifts exactly the requested number of crates as one block."""

from __future__ import annotations

from supplystacks.engine import MoveCommand, Stacks
from supplystacks.movers.base import Mover, pop_up_to


class BlockMover(Mover):
    name = "block"

    def crates_to_move(self, cmd: MoveCommand) -> int:
        return cmd.count

    def apply(self, stacks: Stacks, cmd: MoveCommand) -> int:
        popped = pop_up_to(stacks[cmd.source - 1], cmd.count)
        # Reversing the pops keeps the block in its original order.
        stacks[cmd.destination - 1].extend(reversed(popped))
        return len(popped)
