"""CLI rendering and entry point for the crate-stack puzzle."""

from __future__ import annotations

import argparse
import logging
from functools import partial
from pathlib import Path
from typing import List, Optional, Sequence

from tqdm import tqdm

from supplystacks.engine import (
    MOVER_NAMES,
    CrateStackError,
    InstructionParseError,
    ReplayConfig,
    Stacks,
    replay,
    top_crates,
    top_labels,
)
from supplystacks.movers import build_mover
from supplystacks.parsing import parse_puzzle

LOGGER = logging.getLogger(__name__)

LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

DEFAULT_INPUT = Path("input.txt")


def render_stacks(stacks: Stacks) -> str:
    """Draw the stacks in the input diagram format, bottom crate on the lowest row."""

    if not stacks:
        return ""
    height = max(len(column) for column in stacks)
    lines: List[str] = []
    for r in range(height - 1, -1, -1):
        lines.append(" ".join(str(column[r]) if r < len(column) else "   " for column in stacks))
    lines.append(" ".join(f" {i} " for i in range(1, len(stacks) + 1)))
    return "\n".join(lines)


def format_tops(stacks: Stacks) -> List[str]:
    return [str(crate) for crate in top_crates(stacks)]


def solve_text(text: str, cfg: ReplayConfig, *, progress: bool = False) -> Stacks:
    cfg.validate()
    stacks, commands = parse_puzzle(text)
    LOGGER.info(f"replaying {len(commands)} instructions over {len(stacks)} columns ({cfg.mover} mover)")
    wrap = partial(tqdm, desc="replay", total=len(commands), leave=False) if progress else None
    return replay(stacks, commands, build_mover(cfg.mover), progress=wrap)


def solve_file(path: Path, cfg: ReplayConfig, *, progress: bool = False) -> Stacks:
    text = Path(path).read_text(encoding="utf-8")
    LOGGER.debug(f"read {len(text)} characters from {path}")
    return solve_text(text, cfg, progress=progress)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Replay crate moves and report the top crate of every stack")
    parser.add_argument("input", type=Path, nargs="?", default=DEFAULT_INPUT, help="puzzle input file")
    parser.add_argument(
        "--mover",
        choices=list(MOVER_NAMES),
        default="legacy",
        help="legacy moves count-1 crates, block moves count crates in order, single moves them one at a time",
    )
    parser.add_argument("--compact", action="store_true", help="print the top labels as one string")
    parser.add_argument("--show-stacks", action="store_true", help="print the final stacks before the answer")
    parser.add_argument("--progress", action="store_true", help="show a progress bar while replaying")
    parser.add_argument(
        "-log",
        "--loglevel",
        default="warning",
        dest="loglevel",
        choices=list(LEVELS.keys()),
        help="Provide logging level. Example --loglevel debug, default=warning",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(levelname)s: %(asctime)s %(message)s",
        datefmt="%d/%m/%y %H:%M:%S",
        level=LEVELS[args.loglevel],
    )

    cfg = ReplayConfig(mover=args.mover)

    try:
        stacks = solve_file(args.input, cfg, progress=args.progress)
    except InstructionParseError as e:
        LOGGER.error(f"{args.input}: {e} (instruction line {e.lineno}: {e.line!r})")
        raise SystemExit(1) from e
    except (OSError, CrateStackError) as e:
        LOGGER.error(f"{args.input}: {e}")
        raise SystemExit(1) from e

    if args.show_stacks:
        print(render_stacks(stacks))
        print("")

    if args.compact:
        print(top_labels(stacks))
    else:
        for line in format_tops(stacks):
            print(line)


if __name__ == "__main__":
    main()
