from __future__ import annotations

import pytest

from charblocks.core.blocks import BlockRange
from charblocks.core.stats import BlockStat, compute_stats, percent_of, summarize


def _as_tuples(result: dict[str, list[BlockStat]]) -> dict[str, list[tuple[str, int]]]:
    return {group: [(item.block, item.counter) for item in blocks] for group, blocks in result.items()}


def test_compute_stats_mixed_text_with_unclassified_chars() -> None:
    text = "ab王何必αβγ→€"
    assert len(text) == 10

    result = compute_stats(text)

    assert _as_tuples(result) == {
        "Latin": [("Basic Latin", 2)],
        "CJK": [("CJK Unified Ideographs", 3)],
    }
    assert result["Latin"][0].proportion == pytest.approx(20.0)
    assert result["CJK"][0].proportion == pytest.approx(30.0)
    total_share = sum(item.proportion for blocks in result.values() for item in blocks)
    assert total_share == pytest.approx(50.0)


def test_compute_stats_single_character() -> None:
    result = compute_stats("A")
    assert _as_tuples(result) == {"Latin": [("Basic Latin", 1)]}
    assert result["Latin"][0].proportion == pytest.approx(100.0)


def test_compute_stats_empty_text_returns_empty_mapping() -> None:
    assert compute_stats("") == {}


def test_compute_stats_first_occurrence_counts_once() -> None:
    result = compute_stats("王")
    assert result["CJK"][0].counter == 1


def test_compute_stats_keeps_first_seen_order() -> None:
    result = compute_stats("é王Жa。ж")
    assert list(result) == ["Latin", "CJK", "Cyrillic"]
    assert [item.block for item in result["Latin"]] == ["Latin-1 Supplement", "Basic Latin"]
    assert [item.block for item in result["CJK"]] == ["CJK Unified Ideographs", "CJK Symbols and Punctuation"]
    assert _as_tuples(result)["Cyrillic"] == [("Cyrillic", 2)]


def test_compute_stats_counters_match_proportions() -> None:
    text = "王何必曰利？亦有仁義而已矣。Being wise and good."
    result = compute_stats(text)
    for blocks in result.values():
        for item in blocks:
            assert item.proportion == pytest.approx(item.counter / len(text) * 100)
    counted = sum(item.counter for blocks in result.values() for item in blocks)
    # The fullwidth question mark is outside every declared block.
    assert counted == len(text) - 1


def test_compute_stats_is_idempotent() -> None:
    text = "Привет, world 王"
    first = compute_stats(text)
    second = compute_stats(text)
    assert first == second
    assert first is not second


def test_compute_stats_with_custom_table() -> None:
    table = (BlockRange("Digits", "ASCII digits", 0x30, 0x39),)
    result = compute_stats("a1b22", table)
    assert _as_tuples(result) == {"Digits": [("ASCII digits", 3)]}
    assert result["Digits"][0].proportion == pytest.approx(60.0)


def test_block_stat_increment_refreshes_proportion() -> None:
    stat = BlockStat(block="Basic Latin")
    stat.increment(4)
    assert stat.proportion == pytest.approx(25.0)
    stat.increment(4)
    assert stat.counter == 2
    assert stat.proportion == pytest.approx(50.0)


def test_percent_of_guards_zero_total() -> None:
    assert percent_of(0, 0) == 0.0
    assert percent_of(3, 0) == 0.0
    assert percent_of(1, 4) == pytest.approx(25.0)


def test_summarize_reports_classified_and_unclassified() -> None:
    stats = summarize("ab王何必αβγ→€")
    assert stats.total == 10
    assert stats.classified == 5
    assert stats.unclassified == 5
    assert stats.classified_share == pytest.approx(50.0)
    assert stats.unclassified_share == pytest.approx(50.0)
    totals = stats.group_totals()
    assert totals["Latin"][0] == 2
    assert totals["CJK"][1] == pytest.approx(30.0)


def test_summarize_empty_text_has_zero_shares() -> None:
    stats = summarize("")
    assert stats.total == 0
    assert stats.groups == {}
    assert stats.classified_share == 0.0
    assert stats.unclassified_share == 0.0
