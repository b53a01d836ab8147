"""Move strategies for replaying crate instructions."""

from supplystacks.engine import ReplayConfig
from supplystacks.movers.base import Mover
from supplystacks.movers.block import BlockMover
from supplystacks.movers.legacy import LegacyMover
from supplystacks.movers.single import SingleCrateMover


def build_mover(name: str) -> Mover:
    ReplayConfig(mover=name).validate()
    if name == "legacy":
        return LegacyMover()
    if name == "block":
        return BlockMover()
    return SingleCrateMover()


__all__ = ["Mover", "LegacyMover", "BlockMover", "SingleCrateMover", "build_mover"]
