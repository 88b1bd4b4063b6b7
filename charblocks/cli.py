from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from charblocks.config import resolve_block_table
from charblocks.core.stats import summarize
from charblocks.errors import CharBlocksError
from charblocks.reporting.render import render_block_table, render_markdown, render_text, stats_payload
from charblocks.settings import settings

logger = logging.getLogger(__name__)

SAMPLE_TEXT = (
    "王何必曰利？亦有仁義而已矣。Being wise and good, they have pleasure in these things. "
    "If they are not wise and good, though they have these things, they do not find pleasure."
)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Report which Unicode blocks a text is built from.")
    source = p.add_mutually_exclusive_group()
    source.add_argument("text", nargs="?", default=None, help="Text to analyze. Use '-' to read stdin.")
    source.add_argument("--file", default=None, help="Read text from a UTF-8 file instead.")
    p.add_argument("--format", choices=["text", "markdown", "json"], default="text")
    p.add_argument("--block-table", default=settings.block_table_path, help="YAML block table override.")
    p.add_argument("--precision", type=_non_negative_int, default=settings.percent_precision)
    p.add_argument("--log-level", default=settings.log_level)
    p.add_argument("--list-blocks", action="store_true", help="Print the active block table and exit.")
    return p.parse_args(argv)


def _read_input(args: argparse.Namespace) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text == "-":
        return sys.stdin.read()
    if args.text is not None:
        return args.text
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return SAMPLE_TEXT


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        table = resolve_block_table(args.block_table)
        if args.list_blocks:
            print(render_block_table(table), end="")
            return 0
        text = _read_input(args)
    except (CharBlocksError, OSError, UnicodeDecodeError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 2

    stats = summarize(text, table)
    logger.debug("analyzed %d code points, classified=%d", stats.total, stats.classified)

    if args.format == "json":
        print(json.dumps(stats_payload(stats, precision=args.precision), ensure_ascii=False, indent=2))
    elif args.format == "markdown":
        print(render_markdown(stats, precision=args.precision))
    else:
        print(render_text(stats, precision=args.precision), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
