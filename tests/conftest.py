import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_add_repo_root_to_path()


DIAGRAM_ROWS = [
    "        [F] [Q]         [Q]        ",
    "[B]     [Q] [V] [D]     [S]        ",
    "[S] [P] [T] [R] [M]     [D]        ",
    "[J] [V] [W] [M] [F]     [J]     [J]",
    "[Z] [G] [S] [W] [N] [D] [R]     [T]",
    "[V] [M] [B] [G] [S] [C] [T] [V] [S]",
    "[D] [S] [L] [J] [L] [G] [G] [F] [R]",
    "[G] [Z] [C] [H] [C] [R] [H] [P] [D]",
]

FOOTER = " 1   2   3   4   5   6   7   8   9 "

INSTRUCTIONS = [
    "move 3 from 5 to 2",
    "move 3 from 8 to 4",
    "move 7 from 7 to 3",
    "move 14 from 3 to 9",
    "move 8 from 4 to 1",
    "move 1 from 7 to 5",
    "move 2 from 6 to 4",
    "move 4 from 5 to 7",
    "move 1 from 3 to 6",
    "move 3 from 4 to 3",
    "move 1 from 4 to 1",
]


@pytest.fixture
def diagram_rows():
    return list(DIAGRAM_ROWS)


@pytest.fixture
def instructions():
    return list(INSTRUCTIONS)


@pytest.fixture
def puzzle_text():
    return "\n" + "\n".join(DIAGRAM_ROWS + [FOOTER, ""] + INSTRUCTIONS)
