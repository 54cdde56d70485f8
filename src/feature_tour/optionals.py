"""Optional value handling."""

from __future__ import annotations

from typing import TypeVar

from .exceptions import NoValuePresentError

T = TypeVar("T")


def or_else_throw(value: T | None) -> T:
    """Unwrap ``value`` or raise :class:`NoValuePresentError` when it is ``None``."""
    if value is None:
        raise NoValuePresentError("No value present")
    return value


def demonstrate_optional_api() -> None:
    optional_name: str | None = "Alice"
    result = or_else_throw(optional_name)
    print(f"Optional value: {result}")


def run_all() -> None:
    demonstrate_optional_api()


if __name__ == "__main__":
    run_all()
