from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True, slots=True)
class BlockRange:
    group: str
    block: str
    start: int
    end: int

    def contains(self, code_point: int) -> bool:
        return self.start <= code_point <= self.end


BLOCK_TABLE: tuple[BlockRange, ...] = (
    # Latin
    BlockRange("Latin", "Basic Latin", 0x0000, 0x007F),
    BlockRange("Latin", "Latin-1 Supplement", 0x0080, 0x00FF),
    BlockRange("Latin", "Latin Extended-A", 0x0100, 0x017F),
    BlockRange("Latin", "Latin Extended-B", 0x0180, 0x024F),
    BlockRange("Latin", "Latin Extended Additional", 0x1E00, 0x1EFF),
    BlockRange("Latin", "Latin Extended-C", 0x2C60, 0x2C7F),
    BlockRange("Latin", "Latin Extended-D", 0xA720, 0xA7FF),
    BlockRange("Latin", "Latin Extended-E", 0xAB30, 0xAB6F),
    # Cyrillic
    BlockRange("Cyrillic", "Cyrillic", 0x0400, 0x04FF),
    BlockRange("Cyrillic", "Cyrillic Supplement", 0x0500, 0x052F),
    BlockRange("Cyrillic", "Cyrillic Extended-C", 0x1C80, 0x1C8F),
    BlockRange("Cyrillic", "Cyrillic Extended-A", 0x2DE0, 0x2DFF),
    BlockRange("Cyrillic", "Cyrillic Extended-B", 0xA640, 0xA69F),
    # CJK
    BlockRange("CJK", "CJK Radicals Supplement", 0x2E80, 0x2EFF),
    BlockRange("CJK", "CJK Symbols and Punctuation", 0x3000, 0x303F),
    BlockRange("CJK", "CJK Strokes", 0x31C0, 0x31EF),
    BlockRange("CJK", "Enclosed CJK Letters and Months", 0x3200, 0x32FF),
    BlockRange("CJK", "CJK Compatibility", 0x3300, 0x33FF),
    BlockRange("CJK", "CJK Unified Ideographs Extension A", 0x3400, 0x4DBF),
    BlockRange("CJK", "CJK Unified Ideographs", 0x4E00, 0x9FFF),
    BlockRange("CJK", "CJK Compatibility Forms", 0xFE30, 0xFE4F),
    BlockRange("CJK", "CJK Unified Ideographs Extension B", 0x20000, 0x2A6DF),
    BlockRange("CJK", "CJK Unified Ideographs Extension C", 0x2A700, 0x2B73F),
    BlockRange("CJK", "CJK Unified Ideographs Extension D", 0x2B740, 0x2B81F),
    BlockRange("CJK", "CJK Unified Ideographs Extension E", 0x2B820, 0x2CEAF),
    BlockRange("CJK", "CJK Unified Ideographs Extension F", 0x2CEB0, 0x2EBEF),
    # Repeated entry; never matched because the one above wins.
    BlockRange("CJK", "CJK Unified Ideographs Extension F", 0x2CEB0, 0x2EBEF),
    BlockRange("CJK", "CJK Compatibility Ideographs Supplement", 0x2F800, 0x2FA1F),
    BlockRange("CJK", "CJK Unified Ideographs Extension G", 0x30000, 0x3134F),
)


def group_names(table: Iterable[BlockRange] = BLOCK_TABLE) -> list[str]:
    names: list[str] = []
    for entry in table:
        if entry.group not in names:
            names.append(entry.group)
    return names


def blocks_in_group(group: str, table: Iterable[BlockRange] = BLOCK_TABLE) -> list[BlockRange]:
    return [entry for entry in table if entry.group == group]
