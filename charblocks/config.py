from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from charblocks.core.blocks import BLOCK_TABLE, MAX_CODE_POINT, BlockRange
from charblocks.errors import BlockTableError

logger = logging.getLogger(__name__)


def _parse_code_point(value: Any) -> Any:
    if isinstance(value, str):
        raw = value.strip()
        if raw[:2].upper() == "U+":
            return int(raw[2:], 16)
        return int(raw, 0)
    return value


class BlockRangeDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    group: str = Field(min_length=1)
    block: str = Field(min_length=1)
    start: int = Field(ge=0, le=MAX_CODE_POINT)
    end: int = Field(ge=0, le=MAX_CODE_POINT)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _coerce_code_point(cls, value: Any) -> Any:
        return _parse_code_point(value)

    @model_validator(mode="after")
    def _validate_bounds(self) -> "BlockRangeDefinition":
        if self.start > self.end:
            raise ValueError(f"block '{self.block}' has start 0x{self.start:04X} after end 0x{self.end:04X}")
        return self

    def to_range(self) -> BlockRange:
        return BlockRange(group=self.group, block=self.block, start=self.start, end=self.end)


class BlockTableConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    blocks: list[BlockRangeDefinition] = Field(min_length=1)

    def duplicate_blocks(self) -> list[str]:
        seen: set[str] = set()
        duplicates: list[str] = []
        for item in self.blocks:
            if item.block in seen and item.block not in duplicates:
                duplicates.append(item.block)
            seen.add(item.block)
        return duplicates

    def to_table(self) -> tuple[BlockRange, ...]:
        return tuple(item.to_range() for item in self.blocks)


def load_block_table(path: str | Path) -> tuple[BlockRange, ...]:
    table_path = Path(path)
    try:
        with table_path.open("r", encoding="utf-8") as file:
            raw = yaml.safe_load(file) or {}
    except OSError as exc:
        raise BlockTableError(f"cannot read block table {table_path}: {exc}", path=str(table_path)) from exc
    except yaml.YAMLError as exc:
        raise BlockTableError(f"invalid YAML in block table {table_path}: {exc}", path=str(table_path)) from exc

    try:
        config = BlockTableConfig.model_validate(raw)
    except ValidationError as exc:
        raise BlockTableError(f"invalid block table {table_path}: {exc}", path=str(table_path)) from exc

    duplicates = config.duplicate_blocks()
    if duplicates:
        # First match wins during lookup, later repeats are unreachable.
        logger.info("block table %s repeats blocks: %s", table_path, ", ".join(duplicates))
    table = config.to_table()
    logger.info("block table loaded from %s, entries=%d", table_path, len(table))
    return table


def resolve_block_table(path: str | Path | None) -> tuple[BlockRange, ...]:
    if not path:
        return BLOCK_TABLE
    return load_block_table(path)
