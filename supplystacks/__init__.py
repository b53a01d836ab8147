"""Crate-stack puzzle package (parsers + replay engine + CLI)."""

from supplystacks.engine import (
    PLACEHOLDER_CRATE,
    Crate,
    CrateStackError,
    InstructionParseError,
    InvalidColumnIndexError,
    MoveCommand,
    ReplayConfig,
    replay,
    top_crates,
    top_labels,
)
from supplystacks.parsing import parse_instructions, parse_puzzle, parse_stacks, split_diagram

__all__ = [
    "PLACEHOLDER_CRATE",
    "Crate",
    "CrateStackError",
    "InstructionParseError",
    "InvalidColumnIndexError",
    "MoveCommand",
    "ReplayConfig",
    "parse_instructions",
    "parse_puzzle",
    "parse_stacks",
    "replay",
    "split_diagram",
    "top_crates",
    "top_labels",
]
