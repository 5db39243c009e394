import pytest

from patternbook.observer import (
    ConcreteSubject,
    Message,
    Observer,
    ObserverA,
    ObserverB,
    ObserverC,
    Subject,
)


def test_all_attached_observers_get_message():
    subject = Subject()
    observers = [Observer(subject) for _ in range(3)]
    subject.create_message("Hello World!")
    assert [o.message_from_subject for o in observers] == ["Hello World!"] * 3


def test_removed_observer_gets_no_more_messages():
    subject = Subject()
    kept = Observer(subject)
    removed = Observer(subject)
    subject.create_message("Hello World!")
    removed.remove_me_from_the_list()
    subject.create_message("Начинаем работу!")
    assert kept.message_from_subject == "Начинаем работу!"
    assert removed.message_from_subject == "Hello World!"
    assert subject.observers == (kept,)


def test_observer_numbers_increase():
    subject = Subject()
    first = Observer(subject)
    second = Observer(subject)
    assert second.number == first.number + 1


def test_how_many_observers(capsys):
    subject = Subject()
    Observer(subject)
    Observer(subject)
    capsys.readouterr()
    assert subject.how_many_observers() == 2
    assert capsys.readouterr().out == "Всего 2 подписчика в списке.\n"


def test_default_message_and_business_logic():
    subject = Subject()
    observer = Observer(subject)
    subject.create_message()
    assert observer.message_from_subject == "Пусто"
    subject.some_business_logic()
    assert observer.message_from_subject == "Изменение сообщения"


def test_show_info_line():
    subject = Subject()
    observer = Observer(subject)
    subject.create_message("Hello World!")
    assert observer.show_info() == (
        f'Подписчик "{observer.number}": получил новое сообщение --> Hello World!'
    )


def test_detach_absent_observer_is_ignored():
    subject = Subject()
    other = Subject()
    stranger = Observer(other)
    kept = Observer(subject)
    subject.detach(stranger)
    assert subject.observers == (kept,)


def test_concrete_subject_notify_order_and_detach():
    a, b, c = ObserverA(), ObserverB(), ObserverC()
    publisher = ConcreteSubject()
    publisher.attach(a)
    publisher.attach(b)
    assert publisher.notify(Message("First update")) == [
        "observerA: First update",
        "observerB: First update",
    ]
    publisher.attach(c)
    publisher.detach(b)
    assert publisher.notify(Message("Second update")) == [
        "observerA: Second update",
        "observerC: Second update",
    ]


def test_concrete_subject_detach_missing_raises():
    publisher = ConcreteSubject()
    with pytest.raises(ValueError):
        publisher.detach(ObserverA())