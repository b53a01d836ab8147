"""Core crate-stack state, move commands and the replay loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional

if TYPE_CHECKING:
    from supplystacks.movers.base import Mover

LOGGER = logging.getLogger(__name__)

MOVER_NAMES = ("legacy", "block", "single")


class CrateStackError(ValueError):
    """Base class for errors raised while parsing or replaying a puzzle."""


class InstructionParseError(CrateStackError):
    def __init__(self, line: str, lineno: int) -> None:
        super().__init__("could not parse instructions")
        self.line = line
        self.lineno = lineno


class InvalidColumnIndexError(CrateStackError):
    def __init__(self, command: "MoveCommand", columns: int) -> None:
        super().__init__(f"invalid column index in '{command}' (have {columns} columns)")
        self.command = command
        self.columns = columns


@dataclass(frozen=True)
class Crate:
    label: str

    def __post_init__(self) -> None:
        if len(self.label) != 1:
            raise ValueError("crate label must be a single character")

    def __str__(self) -> str:
        return f"[{self.label}]"

    __repr__ = __str__


@dataclass(frozen=True)
class MoveCommand:
    count: int
    source: int  # 1-based
    destination: int  # 1-based

    def __str__(self) -> str:
        return f"move {self.count} from {self.source} to {self.destination}"


# Column i (1-based) lives at index i - 1; each column is bottom-first.
Stacks = List[List[Crate]]

# Shown in place of a top crate when a column ends up empty.
PLACEHOLDER_CRATE = Crate("1")


@dataclass(frozen=True)
class ReplayConfig:
    mover: str = "legacy"

    def validate(self) -> None:
        if self.mover not in MOVER_NAMES:
            raise ValueError(f"unknown mover: {self.mover} (expected one of {', '.join(MOVER_NAMES)})")


def check_indices(stacks: Stacks, cmd: MoveCommand) -> None:
    columns = len(stacks)
    for index in (cmd.source, cmd.destination):
        if index < 1 or index > columns:
            raise InvalidColumnIndexError(cmd, columns)


def replay(
    stacks: Stacks,
    commands: Iterable[MoveCommand],
    mover: Optional["Mover"] = None,
    *,
    progress: Optional[Callable[[Iterable[MoveCommand]], Iterable[MoveCommand]]] = None,
) -> Stacks:
    """
    Apply every command in order, mutating ``stacks`` in place.

    There is no rollback: if a command fails the bounds check, the commands
    before it stay applied. Moving more crates than a column holds is not an
    error; the mover simply moves what is there.
    """

    if mover is None:
        from supplystacks.movers.legacy import LegacyMover

        mover = LegacyMover()

    if progress is not None:
        commands = progress(commands)

    for cmd in commands:
        check_indices(stacks, cmd)
        wanted = mover.crates_to_move(cmd)
        available = len(stacks[cmd.source - 1])
        moved = mover.apply(stacks, cmd)
        if moved < wanted:
            LOGGER.warning(f"'{cmd}': column {cmd.source} held {available} crates, moved {moved} of {wanted}")
        LOGGER.debug(f"'{cmd}': moved {moved} crates with {mover.name}")

    return stacks


def top_crates(stacks: Stacks) -> List[Crate]:
    return [column[-1] if column else PLACEHOLDER_CRATE for column in stacks]


def top_labels(stacks: Stacks) -> str:
    return "".join(crate.label for crate in top_crates(stacks))
