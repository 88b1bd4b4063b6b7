from __future__ import annotations

import pytest

from charblocks.core.blocks import BLOCK_TABLE, BlockRange
from charblocks.core.classifier import BlockMatch, classify, classify_char


@pytest.mark.parametrize(
    ("code_point", "group", "block"),
    [
        (0x0041, "Latin", "Basic Latin"),
        (0x007F, "Latin", "Basic Latin"),
        (0x0080, "Latin", "Latin-1 Supplement"),
        (0x024F, "Latin", "Latin Extended-B"),
        (0x0416, "Cyrillic", "Cyrillic"),
        (0x1C80, "Cyrillic", "Cyrillic Extended-C"),
        (0x3002, "CJK", "CJK Symbols and Punctuation"),
        (0x4E00, "CJK", "CJK Unified Ideographs"),
        (0x9FFF, "CJK", "CJK Unified Ideographs"),
        (0x2CEB0, "CJK", "CJK Unified Ideographs Extension F"),
        (0x3134F, "CJK", "CJK Unified Ideographs Extension G"),
    ],
)
def test_classify_returns_covering_block(code_point: int, group: str, block: str) -> None:
    assert classify(code_point) == BlockMatch(group=group, block=block)


@pytest.mark.parametrize("code_point", [0x0250, 0x0370, 0x2192, 0xFF1F, 0x1F600, 0x31350, 0x10FFFF])
def test_classify_returns_none_outside_declared_ranges(code_point: int) -> None:
    assert classify(code_point) is None


def test_classify_first_declared_range_wins_on_overlap() -> None:
    table = (
        BlockRange("A", "first", 0x00, 0x10),
        BlockRange("B", "second", 0x05, 0x20),
    )
    assert classify(0x07, table) == BlockMatch(group="A", block="first")
    assert classify(0x15, table) == BlockMatch(group="B", block="second")


def test_classify_matches_linear_scan_of_table() -> None:
    for code_point in range(0x0000, 0x3400, 7):
        expected = next((entry for entry in BLOCK_TABLE if entry.contains(code_point)), None)
        result = classify(code_point)
        if expected is None:
            assert result is None
        else:
            assert result == BlockMatch(group=expected.group, block=expected.block)


def test_classify_char_uses_code_point() -> None:
    assert classify_char("王") == BlockMatch(group="CJK", block="CJK Unified Ideographs")
    assert classify_char("😀") is None


def test_classify_char_rejects_multi_character_input() -> None:
    with pytest.raises(ValueError):
        classify_char("ab")
