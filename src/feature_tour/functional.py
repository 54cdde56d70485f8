"""Callables as values: functions, predicates, consumers and suppliers."""

from __future__ import annotations

from typing import Callable

Function = Callable[[int], int]
Predicate = Callable[[str], bool]
Consumer = Callable[[str], None]
Supplier = Callable[[], str]


def demonstrate_functional_interfaces() -> None:
    square: Function = lambda x: x * x
    print(f"Square of 5: {square(5)}")

    is_not_empty: Predicate = lambda text: bool(text)
    print(f"Is string 'Hello' not empty? {is_not_empty('Hello')}")

    print_upper_case: Consumer = lambda text: print(text.upper())
    print_upper_case("hello")

    get_greeting: Supplier = lambda: "Hello, World!"
    print(get_greeting())


def run_all() -> None:
    demonstrate_functional_interfaces()


if __name__ == "__main__":
    run_all()
