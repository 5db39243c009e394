"""Decorator: wrap components to extend their behaviour."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Behaviour that decorators can change."""

    @abstractmethod
    def operation(self):
        """Return the result of this component's work."""


class ConcreteComponent(Component):
    def operation(self):
        return "Конкретный компонент"


class Decorator(Component):
    """Base wrapper that delegates to the wrapped component."""

    def __init__(self, component: Component) -> None:
        self.component = component

    def operation(self):
        return self.component.operation()


class ConcreteDecoratorA(Decorator):
    def operation(self):
        return "Конкретный декораторA(" + super().operation() + ")"


class ConcreteDecoratorB(Decorator):
    def operation(self):
        return "Конкретный декораторB(" + super().operation() + ")"


def client_code(component):
    """Print and return the component's result line."""
    result = "РЕЗУЛЬТАТ: " + component.operation()
    print(result)
    return result


def demo():
    """Run the decorator demonstration."""
    simple = ConcreteComponent()
    print("Клиент: Получен простой компонент:")
    client_code(simple)
    print()
    decorated = ConcreteDecoratorB(ConcreteDecoratorA(simple))
    print("Клиент: Получен декорированный компонент:")
    client_code(decorated)