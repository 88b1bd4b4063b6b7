from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from charblocks.core.blocks import BlockRange
from charblocks.core.stats import TextStats


def _fmt_pct(value: float, precision: int) -> str:
    return f"{value:.{precision}f}%"


def stats_payload(stats: TextStats, *, precision: int | None = None) -> dict[str, Any]:
    def _round(value: float) -> float:
        return round(value, precision) if precision is not None else value

    groups: list[dict[str, Any]] = []
    totals = stats.group_totals()
    for group, blocks in stats.groups.items():
        count, share = totals[group]
        groups.append(
            {
                "group": group,
                "counter": count,
                "proportion": _round(share),
                "blocks": [
                    {"block": item.block, "counter": item.counter, "proportion": _round(item.proportion)}
                    for item in blocks
                ],
            }
        )
    return {
        "total": stats.total,
        "classified": stats.classified,
        "unclassified": stats.unclassified,
        "classified_share": _round(stats.classified_share),
        "groups": groups,
    }


def render_text(stats: TextStats, *, precision: int = 2) -> str:
    lines: list[str] = ["", f"\tTotal chars: {stats.total}", ""]
    for group, blocks in stats.groups.items():
        lines.append(f"\t{group}")
        for item in blocks:
            lines.append(f"\t\t{item.block}")
            lines.append(f"\t\t\tChars: {item.counter}")
            lines.append(f"\t\t\tPercentage: {_fmt_pct(item.proportion, precision)}")
            lines.append("")
    if not stats.groups:
        lines.append("\tNo classified characters.")
    return "\n".join(lines) + "\n"


def render_markdown(stats: TextStats, *, precision: int = 2) -> str:
    lines: list[str] = [
        "# Unicode Block Composition",
        "",
        f"- Total chars: `{stats.total}`",
        f"- Classified: `{stats.classified}` ({_fmt_pct(stats.classified_share, precision)})",
        f"- Unclassified: `{stats.unclassified}` ({_fmt_pct(stats.unclassified_share, precision)})",
        "",
    ]
    totals = stats.group_totals()
    for group, blocks in stats.groups.items():
        count, share = totals[group]
        lines.append(f"## {group} ({count}, {_fmt_pct(share, precision)})")
        lines.append("")
        lines.append("| Block | Chars | Percentage |")
        lines.append("|---|---:|---:|")
        for item in blocks:
            lines.append(f"| {item.block} | {item.counter} | {_fmt_pct(item.proportion, precision)} |")
        lines.append("")
    return "\n".join(lines)


def render_block_table(table: Sequence[BlockRange]) -> str:
    lines: list[str] = []
    for entry in table:
        lines.append(f"{entry.group}\t{entry.block}\tU+{entry.start:04X}..U+{entry.end:04X}")
    return "\n".join(lines) + "\n"
