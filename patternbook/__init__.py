"""Runnable examples of a builder and of structural and behavioural design patterns."""

__version__ = "0.1.0"

__all__ = [
    "adapter",
    "bridge",
    "builder",
    "chain",
    "command",
    "composite",
    "decorator",
    "facade",
    "flyweight",
    "iterator",
    "mediator",
    "mvc",
    "observer",
    "proxy",
    "visitor",
]