"""Mediator: components talk through a mediator instead of to each other."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _say(text: str) -> str:
    print(text)
    return text


class Mediator(ABC):
    """Receives events from components and decides what happens next."""

    @abstractmethod
    def notify(self, sender, event):
        """React to ``event`` raised by ``sender``; return the lines reported."""


class BaseComponent:
    """A component that knows its mediator."""

    def __init__(self, mediator: Mediator | None = None) -> None:
        self.mediator = mediator

    def _perform(self, text: str, event: str) -> list[str]:
        if self.mediator is None:
            raise RuntimeError(f"{type(self).__name__} has no mediator")
        return [_say(text), *self.mediator.notify(self, event)]


class Component1(BaseComponent):
    def do_a(self):
        """Do A and tell the mediator; return every line reported."""
        return self._perform("Компонент 1 выполняет A.", "A")

    def do_b(self):
        """Do B and tell the mediator; return every line reported."""
        return self._perform("Компонент 1 выполняет B.", "B")


class Component2(BaseComponent):
    def do_c(self):
        """Do C and tell the mediator; return every line reported."""
        return self._perform("Компонент 2 выполняет C.", "C")

    def do_d(self):
        """Do D and tell the mediator; return every line reported."""
        return self._perform("Компонент 2 выполняет D.", "D")


class ConcreteMediator(Mediator):
    """Coordinates one Component1 and one Component2."""

    def __init__(self, component1: Component1, component2: Component2) -> None:
        self.component1 = component1
        self.component2 = component2
        component1.mediator = self
        component2.mediator = self

    def notify(self, sender, event):
        lines: list[str] = []
        if event == "A":
            if not isinstance(sender, Component1):
                raise TypeError("event A must come from a Component1")
            lines.append(
                _say("Посредник реагирует на A и запускает следующие операции:")
            )
            lines += self.component2.do_c()
            lines += sender.do_b()
            lines.append(_say(type(sender).__name__))
        if event == "D":
            if not isinstance(sender, Component2):
                raise TypeError("event D must come from a Component2")
            lines.append(
                _say("Посредник реагирует на D и запускает следующие операции:")
            )
            lines += self.component1.do_b()
            lines += self.component2.do_c()
            lines += sender.do_c()
            lines.append(_say(type(sender).__name__))
        return lines


class MessageMediator(ABC):
    """Passes messages between colleagues."""

    @abstractmethod
    def send(self, message, colleague):
        """Deliver ``message`` sent by ``colleague``."""


class Colleague:
    """A participant that sends messages through a mediator."""

    label = "Colleague"

    def __init__(self, mediator: MessageMediator) -> None:
        self.mediator = mediator

    def send(self, message):
        """Send ``message`` through the mediator; return the delivery report."""
        return self.mediator.send(message, self)

    def receive(self, message):
        """Print and return the line announcing the received message."""
        return _say(f"{self.label} gets message '{message}'")


class ConcreteColleague1(Colleague):
    label = "Colleague1"


class ConcreteColleague2(Colleague):
    label = "Colleague2"


class ChatMediator(MessageMediator):
    """Delivers each colleague's message to the other one."""

    def __init__(
        self,
        colleague1: Colleague | None = None,
        colleague2: Colleague | None = None,
    ) -> None:
        self.colleague1 = colleague1
        self.colleague2 = colleague2

    def send(self, message, colleague):
        """Deliver to the partner of ``colleague``; None if it is unknown."""
        if colleague is self.colleague1:
            partner = self.colleague2
        elif colleague is self.colleague2:
            partner = self.colleague1
        else:
            return None
        if partner is None:
            raise RuntimeError("no colleague to deliver the message to")
        return partner.receive(message)


def demo():
    """Run the mediator demonstrations."""
    c1 = Component1()
    c2 = Component2()
    ConcreteMediator(c1, c2)
    print("Клиент запускает операцию A.")
    c1.do_a()
    print()
    print("Клиент запускает операцию D.")
    c2.do_d()
    print()

    chat = ChatMediator()
    first = ConcreteColleague1(chat)
    second = ConcreteColleague2(chat)
    chat.colleague1 = first
    chat.colleague2 = second
    first.send("How are you?")
    second.send("Fine, thanks")