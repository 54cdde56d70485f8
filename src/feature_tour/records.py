"""Immutable named-field records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    name: str
    age: int


def demonstrate_records() -> None:
    person = Person("Alice", 30)
    print(f"Person: {person.name}, Age: {person.age}")


def run_all() -> None:
    demonstrate_records()


if __name__ == "__main__":
    run_all()
