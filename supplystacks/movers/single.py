"""Mover that relocates crates one at a time."""

from __future__ import annotations

from supplystacks.engine import MoveCommand, Stacks
from supplystacks.movers.base import Mover


class SingleCrateMover(Mover):
    """Each crate is popped and pushed on its own, so the moved run ends up reversed."""

    name = "single"

    def crates_to_move(self, cmd: MoveCommand) -> int:
        return cmd.count

    def apply(self, stacks: Stacks, cmd: MoveCommand) -> int:
        source = stacks[cmd.source - 1]
        destination = stacks[cmd.destination - 1]
        moved = 0
        while moved < cmd.count and source:
            destination.append(source.pop())
            moved += 1
        return moved
