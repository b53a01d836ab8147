"""Parsers for the crate diagram and the move instructions."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Tuple

import numpy as np

from supplystacks.engine import Crate, InstructionParseError, MoveCommand, Stacks

LOGGER = logging.getLogger(__name__)

MOVE_PATTERN = re.compile(r"move ([0-9]+) from ([0-9]+) to ([0-9]+)")
_MOVE_MARKER = re.compile(r"move")
_BRACKETS = re.compile(r"[\[\]]")

# Each column takes a 4-character field "[X] " with the label at offset 1.
FIELD_WIDTH = 4
LABEL_OFFSET = 1


def split_diagram(lines: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Partition lines into diagram rows and everything else.

    A line belongs to the diagram iff it contains a bracket. The footer with
    the column numbers, blank lines and instructions all land in the second
    list. Relative order is kept within each list.
    """

    diagram: List[str] = []
    other: List[str] = []
    for line in lines:
        (diagram if _BRACKETS.search(line) else other).append(line)
    return diagram, other


def split_text(text: str) -> Tuple[List[str], List[str]]:
    return split_diagram(text.splitlines())


def column_offsets(width: int) -> range:
    return range(LABEL_OFFSET, width, FIELD_WIDTH)


def parse_stacks(diagram_lines: Iterable[str]) -> Stacks:
    """
    Read the crate columns out of the diagram rows.

    The number of columns comes from the length of the first row alone. Rows
    are scanned in the order given and that order is kept, so the first row
    becomes the first (bottom) element of every column. A space, or a row that
    is too short to reach a column, means there is no crate there.
    """

    rows = list(diagram_lines)
    if not rows:
        return []

    width = len(rows[0])
    grid = np.full((len(rows), width), " ", dtype="<U1")
    for r, row in enumerate(rows):
        chars = list(row[:width])
        grid[r, : len(chars)] = chars

    labels = grid[:, LABEL_OFFSET::FIELD_WIDTH]
    return [[Crate(str(c)) for c in column if c != " "] for column in labels.T]


def parse_instructions(lines: Iterable[str]) -> List[MoveCommand]:
    """
    Parse ``move <count> from <source> to <destination>`` lines.

    Everything before the first line mentioning ``move`` is skipped. From there
    on every line has to match exactly; the first one that does not aborts the
    whole parse with :class:`InstructionParseError`.
    """

    lines = list(lines)
    start = next((i for i, line in enumerate(lines) if _MOVE_MARKER.search(line)), len(lines))

    commands: List[MoveCommand] = []
    for lineno, line in enumerate(lines[start:], start=start + 1):
        match = MOVE_PATTERN.fullmatch(line)
        if match is None:
            LOGGER.debug(f"line {lineno} is not a move instruction: {line!r}")
            raise InstructionParseError(line, lineno)
        count, source, destination = (int(g) for g in match.groups())
        commands.append(MoveCommand(count=count, source=source, destination=destination))
    return commands


def parse_puzzle(text: str) -> Tuple[Stacks, List[MoveCommand]]:
    diagram, other = split_text(text)
    stacks = parse_stacks(diagram)
    commands = parse_instructions(other)
    LOGGER.debug(f"parsed {len(stacks)} columns and {len(commands)} instructions")
    return stacks, commands
