"""Builder: assemble products step by step, optionally guided by a director."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class Product1:
    """A product made of named parts."""

    parts: list[str] = field(default_factory=list)

    def list_parts(self):
        """Return a one-line description of the parts."""
        return "Product parts: " + ", ".join(self.parts)


class Builder(ABC):
    """Declares the steps for building product parts."""

    @abstractmethod
    def produce_part_a(self):
        """Add part A."""

    @abstractmethod
    def produce_part_b(self):
        """Add part B."""

    @abstractmethod
    def produce_part_c(self):
        """Add part C."""


class ConcreteBuilder1(Builder):
    """Builds Product1 instances; every step works on the same product."""

    def __init__(self) -> None:
        self._product = Product1()

    def reset(self):
        """Start over with an empty product."""
        self._product = Product1()

    def produce_part_a(self):
        self._product.parts.append("PartA1")

    def produce_part_b(self):
        self._product.parts.append("PartB1")

    def produce_part_c(self):
        self._product.parts.append("PartC1")

    def get_product(self):
        """Return the finished product and start a new one."""
        result = self._product
        self.reset()
        return result


class Director:
    """Runs building steps in a fixed order on its builder."""

    def __init__(self, builder: Builder | None = None) -> None:
        self.builder = builder

    def _require_builder(self) -> Builder:
        if self.builder is None:
            raise RuntimeError("director has no builder")
        return self.builder

    def build_minimal_basic_product(self):
        self._require_builder().produce_part_a()

    def build_full_featured_product(self):
        builder = self._require_builder()
        builder.produce_part_a()
        builder.produce_part_b()
        builder.produce_part_c()


def client_code(director):
    """Build the standard, full and custom products; print and return them."""
    builder = ConcreteBuilder1()
    director.builder = builder
    products = []

    print("Standard basic product:")
    director.build_minimal_basic_product()
    products.append(builder.get_product())
    print(products[-1].list_parts() + "\n")

    print("Full featured product:")
    director.build_full_featured_product()
    products.append(builder.get_product())
    print(products[-1].list_parts() + "\n")

    print("Custom product:")
    builder.produce_part_a()
    builder.produce_part_c()
    products.append(builder.get_product())
    print(products[-1].list_parts() + "\n")

    return products


def demo():
    """Run the builder demonstration."""
    client_code(Director())