"""Abstract base class for crate movers."""

from __future__ import annotations

import abc
from typing import List

from supplystacks.engine import Crate, MoveCommand, Stacks


class Mover(abc.ABC):
    name: str

    @abc.abstractmethod
    def crates_to_move(self, cmd: MoveCommand) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def apply(self, stacks: Stacks, cmd: MoveCommand) -> int:
        """Apply ``cmd`` in place and return how many crates actually moved."""
        raise NotImplementedError


def pop_up_to(column: List[Crate], n: int) -> List[Crate]:
    """Pop at most ``n`` crates off the top of ``column``, top crate first."""

    popped = []
    for _ in range(n):
        if not column:
            break
        popped.append(column.pop())
    return popped
