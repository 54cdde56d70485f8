"""Interfaces with default and static methods, and a marker interface."""

from __future__ import annotations

from abc import ABC


class MarkerInterface(ABC):
    """Carries no methods; implementing it only tags a class."""


class SomeClass(MarkerInterface):
    def display(self) -> None:
        print("Marker Interface Implemented.")


class MyInterface(ABC):
    def default_method(self) -> None:
        print("This is a default method in interface")

    @staticmethod
    def static_method() -> None:
        print("This is a static method in interface")


class DefaultImplementation(MyInterface):
    """Implements :class:`MyInterface` using only its defaults."""


def demonstrate_interfaces() -> None:
    MyInterface.static_method()
    implementation: MyInterface = DefaultImplementation()
    implementation.default_method()

    marked = SomeClass()
    if isinstance(marked, MarkerInterface):
        marked.display()


def run_all() -> None:
    demonstrate_interfaces()


if __name__ == "__main__":
    run_all()
