"""A closed shape hierarchy inspected with structural pattern matching.

``Shape`` is a union of exactly two frozen dataclasses. ``classify_shape``
keeps a default branch for objects that slip past the annotation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Circle:
    radius: float


@dataclass(frozen=True)
class Rectangle:
    length: float
    breadth: float


Shape = Circle | Rectangle

UNKNOWN_SHAPE = "Unknown Shape"


def describe_shape(shape: Shape) -> None:
    if isinstance(shape, Circle):
        print(f"Circle with radius: {shape.radius}")
    elif isinstance(shape, Rectangle):
        print(f"Rectangle with length: {shape.length} and breadth: {shape.breadth}")


def classify_shape(shape: object) -> str:
    match shape:
        case Circle():
            return "A Circle"
        case Rectangle():
            return "A Rectangle"
        case _:
            return UNKNOWN_SHAPE


def demonstrate_shapes() -> None:
    circle = Circle(5.0)
    rectangle = Rectangle(4.0, 6.0)
    describe_shape(circle)
    describe_shape(rectangle)
    print("Match Statement Example: " + classify_shape(circle))


def run_all() -> None:
    demonstrate_shapes()


if __name__ == "__main__":
    run_all()
