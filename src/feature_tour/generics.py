"""Generic containers with covariant readers and contravariant writers.

``print_box_values`` only reads, so it accepts any ``Sequence`` of boxes
regardless of payload. ``add_to_box`` only writes an ``int``, so it accepts
anything that can ``append`` an ``int`` or one of its supertypes, such as a
``list[object]``.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, Sequence, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Box(Generic[T]):
    def __init__(self, value: T) -> None:
        self._value = value

    def get_value(self) -> T:
        return self._value

    def set_value(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class FruitBox(Box[str]):
    pass


class CarBox(Box[int]):
    pass


class SupportsAppend(Protocol[T_contra]):
    def append(self, item: T_contra, /) -> None:
        ...


def print_box_values(boxes: Sequence[Box[Any]]) -> None:
    for box in boxes:
        print(f"Box contains: {box.get_value()}")


def add_to_box(target: SupportsAppend[int]) -> None:
    target.append(100)
    print(f"Added to Box: {target}")


def demonstrate_generics() -> None:
    fruit_boxes: list[Box[str]] = [FruitBox("Apple"), FruitBox("Banana")]
    car_boxes: list[Box[int]] = [CarBox(123), CarBox(456)]
    print_box_values(fruit_boxes)
    print_box_values(car_boxes)

    holder: list[object] = []
    add_to_box(holder)


def run_all() -> None:
    demonstrate_generics()


if __name__ == "__main__":
    run_all()
