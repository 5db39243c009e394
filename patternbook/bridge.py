"""Bridge: separate an abstraction from its implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Implementation(ABC):
    """Primitive operations an abstraction builds on."""

    @abstractmethod
    def operation_implementation(self):
        """Return the platform-specific result."""


class ConcreteImplementationA(Implementation):
    def operation_implementation(self):
        return "ConcreteImplementationA: Результат работы для реализации A.\n"


class ConcreteImplementationB(Implementation):
    def operation_implementation(self):
        return "ConcreteImplementationB: Результат работы для реализации B.\n"


class Abstraction:
    """High-level operation delegating the real work to an implementation."""

    def __init__(self, implementation: Implementation) -> None:
        self.implementation = implementation

    def operation(self):
        return "Abstraction: Базовая операция:\n" + (
            self.implementation.operation_implementation()
        )


class ExtendedAbstraction(Abstraction):
    def operation(self):
        return "ExtendedAbstraction: Расширенная операция:\n" + (
            self.implementation.operation_implementation()
        )


def client_code(abstraction):
    """Print and return the abstraction's operation result."""
    result = abstraction.operation()
    print(result, end="")
    return result


def demo():
    """Run the bridge demonstration."""
    client_code(Abstraction(ConcreteImplementationA()))
    print()
    client_code(ExtendedAbstraction(ConcreteImplementationB()))
    print()
    client_code(Abstraction(ConcreteImplementationB()))