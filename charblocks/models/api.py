from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StatsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    request_id: str | None = None
    text: str


class BlockStatItem(BaseModel):
    block: str
    counter: int
    proportion: float


class GroupStatItem(BaseModel):
    group: str
    counter: int
    proportion: float
    blocks: list[BlockStatItem] = Field(default_factory=list)


class StatsResponse(BaseModel):
    request_id: str
    total: int
    classified: int
    unclassified: int
    classified_share: float
    groups: list[GroupStatItem] = Field(default_factory=list)
    elapsed_ms: float


class BlockRangeItem(BaseModel):
    group: str
    block: str
    start: str
    end: str


class BlocksResponse(BaseModel):
    service: str
    api_version: str
    groups: list[str]
    blocks: list[BlockRangeItem]
