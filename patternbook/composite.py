"""Composite: treat single objects and trees of objects the same way."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Common interface of leaves and composites."""

    def __init__(self) -> None:
        self.parent: Component | None = None

    def add(self, component):
        """Add a child; components without children ignore this."""

    def remove(self, component):
        """Remove a child; components without children ignore this."""

    def is_composite(self):
        """Whether this component can hold children."""
        return False

    @abstractmethod
    def operation(self):
        """Return the result of this component's work."""


class Leaf(Component):
    def operation(self):
        return "Лист"


class Composite(Component):
    """A branch that combines the results of its children."""

    def __init__(self) -> None:
        super().__init__()
        self.children: list[Component] = []

    def add(self, component):
        self.children.append(component)
        component.parent = self

    def remove(self, component):
        self.children = [child for child in self.children if child is not component]
        component.parent = None

    def is_composite(self):
        return True

    def operation(self):
        return "Ветка(" + "+".join(child.operation() for child in self.children) + ")"


def client_code(component):
    """Print and return the component's result line."""
    result = "РЕЗУЛЬТАТ: " + component.operation()
    print(result)
    return result


def client_code2(component1, component2):
    """Add ``component2`` to ``component1`` when possible; report the result."""
    if component1.is_composite():
        component1.add(component2)
    return client_code(component1)


def demo():
    """Run the composite demonstration."""
    simple = Leaf()
    print("Клиент: Добавлен простой компонент:")
    client_code(simple)
    print()

    tree = Composite()
    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())
    branch2 = Composite()
    branch2.add(Leaf())
    tree.add(branch1)
    tree.add(branch2)
    print("Клиент: Добавлен составной объект:")
    client_code(tree)
    print()

    print("Клиент: Работа с простыми и составными объектами:")
    client_code2(tree, simple)