"""Adapter: make an incompatible interface usable through the target one."""

from __future__ import annotations

_ADAPTER_PREFIX = "Adapter: (ПОДКЛЮЧИЛСЯ-СОГЛАСОВАЛ): "


class Target:
    """The interface client code works with."""

    def request(self):
        return "Интерфейс класса Target."


class Adaptee:
    """Useful behaviour behind an interface the client cannot use directly."""

    def specific_request(self):
        return "retpadA зереч tegraT матнеилк непутсод eetpadA ассалк сйефретнИ"


class Adapter(Target):
    """Object adapter: wraps an Adaptee instance."""

    def __init__(self, adaptee: Adaptee) -> None:
        self._adaptee = adaptee

    def request(self):
        return _ADAPTER_PREFIX + self._adaptee.specific_request()[::-1]


class ClassAdapter(Target, Adaptee):
    """Class adapter: inherits from both Target and Adaptee."""

    def request(self):
        return _ADAPTER_PREFIX + self.specific_request()[::-1]


def client_code(target):
    """Print and return the target's request result."""
    result = target.request()
    print(result)
    return result


def demo():
    """Run the adapter demonstrations."""
    print("Client: Работаю только с объектами Target.")
    client_code(Target())
    print()
    adaptee = Adaptee()
    print("Client: Интерфейс класса Adaptee недоступен.")
    print("Adaptee: " + adaptee.specific_request())
    print()
    print("Client: Умею работать с интерфейсом Adaptee через Adapter.")
    client_code(Adapter(adaptee))
    print()
    print("Client: Умею работать с интерфейсом Adaptee через ClassAdapter.")
    client_code(ClassAdapter())