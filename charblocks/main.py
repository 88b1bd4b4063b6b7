from __future__ import annotations

import logging
from time import perf_counter
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, HTTPException

from charblocks.config import resolve_block_table
from charblocks.core.blocks import BLOCK_TABLE, BlockRange, group_names
from charblocks.core.stats import summarize
from charblocks.errors import BlockTableError, TextTooLargeError
from charblocks.models.api import BlockRangeItem, BlocksResponse, StatsRequest, StatsResponse
from charblocks.reporting.render import stats_payload
from charblocks.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Charblocks Service", version="0.1.0")


def _active_table() -> tuple[BlockRange, ...]:
    return getattr(app.state, "block_table", None) or BLOCK_TABLE


def _load_runtime() -> None:
    app.state.block_table = resolve_block_table(settings.block_table_path)
    logger.info(
        "block table ready, source=%s, entries=%d, groups=%s",
        settings.block_table_path or "builtin",
        len(app.state.block_table),
        ",".join(group_names(app.state.block_table)),
    )


def _check_text_size(text: str) -> None:
    if len(text) > settings.max_text_chars:
        raise TextTooLargeError(len(text), settings.max_text_chars)


@app.on_event("startup")
async def startup() -> None:
    app.state.block_table = BLOCK_TABLE
    app.state.block_table_error = None
    try:
        _load_runtime()
    except BlockTableError as exc:
        app.state.block_table_error = str(exc)
        logger.exception("block table load failed, using builtin table: %s", exc)


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    load_error = getattr(app.state, "block_table_error", None)
    if load_error:
        return {"status": "degraded", "block_table_error": str(load_error)}
    return {"status": "ok"}


@app.post("/admin/reload")
async def reload_block_table() -> dict[str, Any]:
    try:
        _load_runtime()
    except BlockTableError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    app.state.block_table_error = None
    table = _active_table()
    return {
        "status": "reloaded",
        "block_table_path": settings.block_table_path,
        "entries": len(table),
        "groups": group_names(table),
    }


@app.get("/v1/blocks", response_model=BlocksResponse)
async def blocks_endpoint() -> BlocksResponse:
    table = _active_table()
    return BlocksResponse(
        service=settings.service_name,
        api_version="v1",
        groups=group_names(table),
        blocks=[
            BlockRangeItem(group=entry.group, block=entry.block, start=f"0x{entry.start:04X}", end=f"0x{entry.end:04X}")
            for entry in table
        ],
    )


@app.post("/v1/stats", response_model=StatsResponse)
async def stats_endpoint(request: StatsRequest) -> StatsResponse:
    started_at = perf_counter()
    request_id = request.request_id or str(uuid4())
    try:
        _check_text_size(request.text)
    except TextTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc

    stats = summarize(request.text, _active_table())
    payload = stats_payload(stats)
    elapsed_ms = (perf_counter() - started_at) * 1000
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "charblocks.stats request_id=%s total=%d classified=%d groups=%s elapsed_ms=%.2f",
            request_id,
            stats.total,
            stats.classified,
            list(stats.groups),
            elapsed_ms,
        )
    return StatsResponse(request_id=request_id, elapsed_ms=round(elapsed_ms, 3), **payload)
