from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from charblocks.core.blocks import BLOCK_TABLE, BlockRange


@dataclass(frozen=True, slots=True)
class BlockMatch:
    group: str
    block: str


def classify(code_point: int, table: Iterable[BlockRange] = BLOCK_TABLE) -> BlockMatch | None:
    """Return the group/block of the first table entry containing ``code_point``.

    Entries are scanned in declaration order, so overlapping or repeated
    ranges resolve to the earliest one. Code points outside every range
    yield ``None``.
    """
    for entry in table:
        if entry.start <= code_point <= entry.end:
            return BlockMatch(group=entry.group, block=entry.block)
    return None


def classify_char(char: str, table: Iterable[BlockRange] = BLOCK_TABLE) -> BlockMatch | None:
    if len(char) != 1:
        raise ValueError(f"expected a single code point, got {len(char)}")
    return classify(ord(char), table)
