from charblocks.core.blocks import BLOCK_TABLE, BlockRange
from charblocks.core.classifier import BlockMatch, classify, classify_char
from charblocks.core.stats import BlockStat, TextStats, compute_stats, summarize

__all__ = [
    "BLOCK_TABLE",
    "BlockMatch",
    "BlockRange",
    "BlockStat",
    "TextStats",
    "classify",
    "classify_char",
    "compute_stats",
    "summarize",
]
