from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from charblocks.core.blocks import BLOCK_TABLE, BlockRange
from charblocks.core.classifier import classify


def percent_of(count: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return count / total * 100


@dataclass(slots=True)
class BlockStat:
    block: str
    counter: int = 0
    proportion: float = 0.0

    def increment(self, total: int) -> None:
        self.counter += 1
        self.proportion = percent_of(self.counter, total)


@dataclass(slots=True)
class TextStats:
    total: int
    classified: int
    groups: dict[str, list[BlockStat]] = field(default_factory=dict)

    @property
    def unclassified(self) -> int:
        return self.total - self.classified

    @property
    def classified_share(self) -> float:
        return percent_of(self.classified, self.total)

    @property
    def unclassified_share(self) -> float:
        return percent_of(self.unclassified, self.total)

    def group_totals(self) -> dict[str, tuple[int, float]]:
        totals: dict[str, tuple[int, float]] = {}
        for group, blocks in self.groups.items():
            count = sum(item.counter for item in blocks)
            totals[group] = (count, percent_of(count, self.total))
        return totals


def compute_stats(text: str, table: Sequence[BlockRange] = BLOCK_TABLE) -> dict[str, list[BlockStat]]:
    """Count code points of ``text`` per group and block.

    ``total`` is the full code point count, unclassified ones included, so
    the reported proportions of a text with unknown characters sum to less
    than 100. Proportions are refreshed on every increment. Groups and the
    blocks inside each group keep the order of their first occurrence.
    """
    total = len(text)
    by_group: dict[str, dict[str, BlockStat]] = {}
    for char in text:
        match = classify(ord(char), table)
        if match is None:
            continue
        blocks = by_group.setdefault(match.group, {})
        stat = blocks.get(match.block)
        if stat is None:
            stat = BlockStat(block=match.block)
            blocks[match.block] = stat
        stat.increment(total)
    return {group: list(blocks.values()) for group, blocks in by_group.items()}


def summarize(text: str, table: Sequence[BlockRange] = BLOCK_TABLE) -> TextStats:
    groups = compute_stats(text, table)
    classified = sum(item.counter for blocks in groups.values() for item in blocks)
    return TextStats(total=len(text), classified=classified, groups=groups)
