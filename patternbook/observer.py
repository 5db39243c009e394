"""Observer: subscribers are told whenever a publisher changes."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import ClassVar


class Subject:
    """Publisher holding a message and a list of subscribers."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self.message = ""

    @property
    def observers(self):
        return tuple(self._observers)

    def attach(self, observer):
        self._observers.append(observer)

    def detach(self, observer):
        """Remove every occurrence of ``observer``; absent ones are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self):
        """Report the subscriber count and send the message to each subscriber."""
        self.how_many_observers()
        for observer in list(self._observers):
            observer.update(self.message)

    def create_message(self, message="Пусто"):
        self.message = message
        self.notify()

    def how_many_observers(self):
        """Print and return the number of subscribers."""
        count = len(self._observers)
        print(f"Всего {count} подписчика в списке.")
        return count

    def some_business_logic(self):
        self.message = "Изменение сообщения"
        self.notify()
        print("Выполнена какая-то работа")


class Observer:
    """A numbered subscriber that attaches itself on creation."""

    _numbers: ClassVar[itertools.count] = itertools.count(1)

    def __init__(self, subject: Subject) -> None:
        self.subject = subject
        self.message_from_subject = ""
        subject.attach(self)
        self.number = next(Observer._numbers)
        print(f'Это Подписчик "{self.number}".')

    def update(self, message_from_subject):
        self.message_from_subject = message_from_subject
        self.show_info()

    def remove_me_from_the_list(self):
        self.subject.detach(self)
        print(f'Подписчик "{self.number}" удален из списка.')

    def show_info(self):
        """Print and return the line with the latest message."""
        line = (
            f'Подписчик "{self.number}": получил новое сообщение --> '
            f"{self.message_from_subject}"
        )
        print(line)
        return line


@dataclass(frozen=True)
class Message:
    """A message published to observers."""

    message: str


class MessageObserver:
    """Subscriber that reports each message with its own label."""

    label = "observer"

    def update(self, message):
        """Print and return the labelled message."""
        line = f"{self.label}: {message.message}"
        print(line)
        return line


class ObserverA(MessageObserver):
    label = "observerA"


class ObserverB(MessageObserver):
    label = "observerB"


class ObserverC(MessageObserver):
    label = "observerC"


class ConcreteSubject:
    """Publisher that sends Message objects to its observers."""

    def __init__(self) -> None:
        self._observers: list[MessageObserver] = []

    @property
    def observers(self):
        return tuple(self._observers)

    def attach(self, observer):
        self._observers.append(observer)

    def detach(self, observer):
        """Remove the first occurrence of ``observer``; ValueError if absent."""
        self._observers.remove(observer)

    def notify(self, message):
        """Send ``message`` to every observer; return their reports."""
        return [observer.update(message) for observer in self._observers]


def demo():
    """Run the observer demonstrations."""
    subject = Subject()
    observer1 = Observer(subject)
    observer2 = Observer(subject)
    observer3 = Observer(subject)
    subject.create_message("Hello World!")
    observer3.remove_me_from_the_list()
    subject.create_message("Начинаем работу!")
    observer4 = Observer(subject)
    observer2.remove_me_from_the_list()
    observer5 = Observer(subject)
    subject.create_message("Работа сделана, домой!")
    observer5.remove_me_from_the_list()
    observer4.remove_me_from_the_list()
    observer1.remove_me_from_the_list()
    print()

    a, b, c = ObserverA(), ObserverB(), ObserverC()
    publisher = ConcreteSubject()
    publisher.attach(a)
    publisher.attach(b)
    publisher.notify(Message("First update\n"))
    publisher.attach(c)
    publisher.detach(b)
    publisher.notify(Message("Second update\n"))