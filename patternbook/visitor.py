"""Visitor: add operations to element classes without changing them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

PI = 3.14


class Visitor(ABC):
    """Declares one visit method per concrete component class."""

    @abstractmethod
    def visit_concrete_component_a(self, element):
        """Visit a ConcreteComponentA."""

    @abstractmethod
    def visit_concrete_component_b(self, element):
        """Visit a ConcreteComponentB."""


class Component(ABC):
    """An element that accepts visitors."""

    @abstractmethod
    def accept(self, visitor):
        """Dispatch to the visitor method for this class; return its result."""


class ConcreteComponentA(Component):
    def accept(self, visitor):
        return visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self):
        return "A"


class ConcreteComponentB(Component):
    def accept(self, visitor):
        return visitor.visit_concrete_component_b(self)

    def special_method_of_concrete_component_b(self):
        return "B"


class _LabelledVisitor(Visitor):
    label: ClassVar[str] = ""

    def _report(self, text: str) -> str:
        line = f"{text} + {self.label}"
        print(line)
        return line

    def visit_concrete_component_a(self, element):
        return self._report(element.exclusive_method_of_concrete_component_a())

    def visit_concrete_component_b(self, element):
        return self._report(element.special_method_of_concrete_component_b())


class ConcreteVisitor1(_LabelledVisitor):
    label = "ConcreteVisitor1"


class ConcreteVisitor2(_LabelledVisitor):
    label = "ConcreteVisitor2"


def client_code(components, visitor):
    """Let ``visitor`` visit every component; return the results in order."""
    return [component.accept(visitor) for component in components]


class ShapeVisitor(ABC):
    """Computes a value for each kind of shape; keeps the last one."""

    def __init__(self) -> None:
        self.value = 0.0

    @abstractmethod
    def visit_circle(self, circle):
        """Compute the value for a circle."""

    @abstractmethod
    def visit_square(self, square):
        """Compute the value for a square."""

    @abstractmethod
    def visit_rectangle(self, rectangle):
        """Compute the value for a rectangle."""


class Shape(ABC):
    """A shape that accepts shape visitors."""

    @abstractmethod
    def accept(self, visitor):
        """Dispatch to the visitor method for this shape; return its result."""


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def accept(self, visitor):
        return visitor.visit_circle(self)


@dataclass(frozen=True)
class Square(Shape):
    length: float

    def accept(self, visitor):
        return visitor.visit_square(self)


@dataclass(frozen=True)
class Rectangle(Shape):
    length: float
    width: float

    def accept(self, visitor):
        return visitor.visit_rectangle(self)


class AreaVisitor(ShapeVisitor):
    """Computes shape areas."""

    def visit_circle(self, circle):
        self.value = PI * math.pow(circle.radius, 2)
        return self.value

    def visit_square(self, square):
        self.value = 2 * square.length
        return self.value

    def visit_rectangle(self, rectangle):
        self.value = rectangle.length * rectangle.width
        return self.value


class PerimeterVisitor(ShapeVisitor):
    """Computes shape perimeters."""

    def visit_circle(self, circle):
        self.value = 2 * PI * circle.radius
        return self.value

    def visit_square(self, square):
        self.value = 4 * square.length
        return self.value

    def visit_rectangle(self, rectangle):
        self.value = 2 * (rectangle.length + rectangle.width)
        return self.value


def demo():
    """Run the visitor demonstrations."""
    components = [ConcreteComponentA(), ConcreteComponentB()]
    print("Клиентский код работает со всеми Посетителями через общий интерфейс Visitor:")
    client_code(components, ConcreteVisitor1())
    print()
    print(
        "Это позволяет одному и тому-же клментскому коду работать "
        "с разными Посетителями:"
    )
    client_code(components, ConcreteVisitor2())
    print()

    shapes = [Circle(10), Square(10), Square(5), Rectangle(10, 4)]
    area_visitor = AreaVisitor()
    for shape in shapes:
        area = shape.accept(area_visitor)
        print(f"Площадь фигуры {type(shape).__name__} равна: {area:g}")
    print("--------------------------------------------")
    perimeter_visitor = PerimeterVisitor()
    for shape in shapes:
        perimeter = shape.accept(perimeter_visitor)
        print(f"Периметр фигуы {type(shape).__name__} равен: {perimeter:g}")