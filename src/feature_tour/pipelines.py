"""Collection pipelines: grouping, filtering, mapping and reductions.

Each ``demonstrate_*`` routine prints its result; the pure helpers next to
them return plain lists and dicts so the transformations can be checked
without capturing output.
"""

from __future__ import annotations

import functools
import itertools
import operator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Mapping, Sequence, TypeVar

V = TypeVar("V")
T = TypeVar("T")

SAMPLE_NAMES = ("Alice", "Bob", "Charlie", "Diana")
SAMPLE_NUMBERS = (10, 20, 30, 40, 50, 60, 70, 80, 90, 100)


def group_by_length(names: Iterable[str]) -> dict[int, list[str]]:
    """Group ``names`` by length, keeping first-seen key and member order."""
    grouped: dict[int, list[str]] = {}
    for name in names:
        grouped.setdefault(len(name), []).append(name)
    return grouped


def demonstrate_grouping() -> None:
    for length, name_list in group_by_length(SAMPLE_NAMES).items():
        print(f"{length}: {name_list}")


def drop_nones_and_double(values: Iterable[int | None]) -> list[int]:
    return [value * 2 for value in values if value is not None]


def demonstrate_filter_and_map() -> None:
    numbers = [1, 2, None, 4, 5]
    print(f"Filtered and mapped numbers: {drop_nones_and_double(numbers)}")


def even_key_entries(mapping: Mapping[int, V]) -> dict[int, V]:
    return {key: value for key, value in mapping.items() if key % 2 == 0}


def demonstrate_dict_filter() -> None:
    mapping = {1: "One", 2: "Two", 3: "Three", 4: "Four"}
    print(f"Filtered map (even keys): {even_key_entries(mapping)}")


@dataclass(frozen=True)
class SummaryStatistics:
    """Count, sum, min, max and average of a run of integers.

    An empty run has ``count == 0``, ``total == 0``, no minimum or maximum,
    and an average of ``0.0``.
    """

    count: int = 0
    total: int = 0
    minimum: int | None = None
    maximum: int | None = None

    @classmethod
    def of(cls, values: Sequence[int]) -> SummaryStatistics:
        if not values:
            return cls()
        return cls(len(values), sum(values), min(values), max(values))

    @property
    def average(self) -> float:
        return self.total / self.count if self.count else 0.0

    def __str__(self) -> str:
        return (
            f"SummaryStatistics{{count={self.count}, sum={self.total}, "
            f"min={self.minimum}, average={self.average:.6f}, max={self.maximum}}}"
        )


def peek(items: Iterable[T], action: Callable[[T], object]) -> Iterator[T]:
    """Yield ``items`` unchanged, calling ``action`` on each as it passes."""
    for item in items:
        action(item)
        yield item


def demonstrate_advanced_pipeline(numbers: Sequence[int] = SAMPLE_NUMBERS) -> None:
    list(peek(numbers, lambda n: print(f"Peek: {n}")))

    for n in itertools.islice(numbers, 5, None):
        print(n)

    for n in itertools.islice(numbers, 3):
        print(n)

    for n in dict.fromkeys(numbers):
        print(n)

    for n in sorted(numbers):
        print(n)

    for label in (f"Number: {n}" for n in numbers):
        print(label)

    print(f"Count: {sum(1 for _ in numbers)}")

    if numbers:
        print(f"Sum: {functools.reduce(operator.add, numbers)}")

    print(f"Summary: {SummaryStatistics.of(numbers)}")

    with ThreadPoolExecutor(thread_name_prefix="tour-parallel") as executor:
        # Output order follows worker scheduling, not input order.
        list(executor.map(lambda n: print(f"Parallel: {n}"), numbers))

    collected = tuple(numbers)
    print(f"Collected: {collected}")

    if numbers:
        print(f"Max: {max(numbers)}")


def first_name_per_length(names: Iterable[str]) -> dict[int, str]:
    """Map each length to the first name that has it; later names are dropped."""
    first: dict[int, str] = {}
    for name in names:
        first.setdefault(len(name), name)
    return first


def demonstrate_ordered_map() -> None:
    print(f"Ordered dict (first name per length): {first_name_per_length(SAMPLE_NAMES)}")


def run_all() -> None:
    """Execute every pipeline demonstration."""
    demonstrate_grouping()
    demonstrate_dict_filter()
    demonstrate_filter_and_map()
    demonstrate_advanced_pipeline()
    demonstrate_ordered_map()


if __name__ == "__main__":
    run_all()
