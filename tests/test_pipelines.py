"""Tests for the collection pipeline helpers."""

from __future__ import annotations

import pytest

from feature_tour import pipelines
from feature_tour.pipelines import (
    SAMPLE_NAMES,
    SummaryStatistics,
    drop_nones_and_double,
    even_key_entries,
    first_name_per_length,
    group_by_length,
    peek,
)


def test_drop_nones_and_double():
    assert drop_nones_and_double([1, 2, None, 4, 5]) == [2, 4, 8, 10]


def test_even_key_entries():
    mapping = {1: "One", 2: "Two", 3: "Three", 4: "Four"}
    assert even_key_entries(mapping) == {2: "Two", 4: "Four"}
    assert mapping == {1: "One", 2: "Two", 3: "Three", 4: "Four"}


def test_group_by_length_merges_same_key_in_order():
    grouped = group_by_length(["Alice", "Bob", "Charlie", "Diana"])
    assert grouped == {5: ["Alice", "Diana"], 3: ["Bob"], 7: ["Charlie"]}
    assert list(grouped) == [5, 3, 7]


def test_first_name_per_length_keeps_earliest():
    assert first_name_per_length(SAMPLE_NAMES) == {5: "Alice", 3: "Bob", 7: "Charlie"}


def test_peek_calls_action_lazily():
    seen = []
    iterator = peek([1, 2, 3], seen.append)
    assert seen == []
    assert list(iterator) == [1, 2, 3]
    assert seen == [1, 2, 3]


def test_summary_statistics():
    stats = SummaryStatistics.of(pipelines.SAMPLE_NUMBERS)
    assert (stats.count, stats.total, stats.minimum, stats.maximum) == (10, 550, 10, 100)
    assert stats.average == 55.0
    assert str(stats) == "SummaryStatistics{count=10, sum=550, min=10, average=55.000000, max=100}"


def test_summary_statistics_of_empty_input():
    stats = SummaryStatistics.of([])
    assert (stats.count, stats.total, stats.minimum, stats.maximum) == (0, 0, None, None)
    assert stats.average == 0.0
    assert str(stats) == "SummaryStatistics{count=0, sum=0, min=None, average=0.000000, max=None}"


def test_grouping_output(capsys):
    pipelines.demonstrate_grouping()
    assert capsys.readouterr().out.splitlines() == [
        "5: ['Alice', 'Diana']",
        "3: ['Bob']",
        "7: ['Charlie']",
    ]


def _with_sorted_parallel_lines(lines):
    parallel = sorted(line for line in lines if line.startswith("Parallel: "))
    rest = iter(parallel)
    return [next(rest) if line.startswith("Parallel: ") else line for line in lines]


def test_advanced_pipeline_output(capsys):
    pipelines.demonstrate_advanced_pipeline()
    lines = capsys.readouterr().out.splitlines()
    numbers = [str(n) for n in pipelines.SAMPLE_NUMBERS]

    assert len(lines) == 63
    assert lines[:10] == [f"Peek: {n}" for n in numbers]
    assert lines[10:15] == ["60", "70", "80", "90", "100"]
    assert lines[15:18] == ["10", "20", "30"]
    assert lines[18:28] == numbers
    assert lines[28:38] == numbers
    assert lines[38:48] == [f"Number: {n}" for n in numbers]
    assert lines[48:51] == [
        "Count: 10",
        "Sum: 550",
        "Summary: SummaryStatistics{count=10, sum=550, min=10, average=55.000000, max=100}",
    ]
    assert sorted(lines[51:61]) == sorted(f"Parallel: {n}" for n in numbers)
    assert lines[61] == "Collected: (10, 20, 30, 40, 50, 60, 70, 80, 90, 100)"
    assert lines[62] == "Max: 100"


def test_advanced_pipeline_distinct_and_sorted_with_duplicates(capsys):
    pipelines.demonstrate_advanced_pipeline([30, 10, 30, 20])
    lines = capsys.readouterr().out.splitlines()

    # peek (4), skip-five (0), limit-three (3), then distinct and sorted.
    assert lines[4:7] == ["30", "10", "30"]
    assert lines[7:10] == ["30", "10", "20"]
    assert lines[10:14] == ["10", "20", "30", "30"]
    assert "Summary: SummaryStatistics{count=4, sum=90, min=10, average=22.500000, max=30}" in lines
    assert "Collected: (30, 10, 30, 20)" in lines


def test_advanced_pipeline_handles_empty_input(capsys):
    pipelines.demonstrate_advanced_pipeline(())
    assert capsys.readouterr().out.splitlines() == [
        "Count: 0",
        "Summary: SummaryStatistics{count=0, sum=0, min=None, average=0.000000, max=None}",
        "Collected: ()",
    ]


def test_advanced_pipeline_is_repeatable(capsys):
    pipelines.demonstrate_advanced_pipeline()
    first = capsys.readouterr().out.splitlines()
    pipelines.demonstrate_advanced_pipeline()
    second = capsys.readouterr().out.splitlines()
    assert _with_sorted_parallel_lines(first) == _with_sorted_parallel_lines(second)


def test_run_all_runs_each_pipeline(capsys):
    pipelines.run_all()
    out = capsys.readouterr().out
    assert "5: ['Alice', 'Diana']" in out
    assert "Filtered map (even keys): {2: 'Two', 4: 'Four'}" in out
    assert "Filtered and mapped numbers: [2, 4, 8, 10]" in out
    assert "Max: 100" in out
    assert out.endswith("Ordered dict (first name per length): {5: 'Alice', 3: 'Bob', 7: 'Charlie'}\n")


@pytest.mark.parametrize(
    "routine",
    [
        pipelines.demonstrate_grouping,
        pipelines.demonstrate_filter_and_map,
        pipelines.demonstrate_dict_filter,
        pipelines.demonstrate_ordered_map,
    ],
)
def test_routines_are_repeatable(capsys, routine):
    routine()
    first = capsys.readouterr().out
    routine()
    assert capsys.readouterr().out == first
