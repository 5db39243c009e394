"""Model-view-controller: views refresh whenever the model changes."""

from __future__ import annotations

from typing import Protocol


class _Observer(Protocol):
    def update(self) -> None: ...


class Observable:
    """Keeps observers and tells them about changes."""

    def __init__(self) -> None:
        self._observers: list[_Observer] = []

    def add_observer(self, observer):
        self._observers.append(observer)

    def notify_update(self):
        for observer in list(self._observers):
            observer.update()


class StudentModel(Observable):
    """A student's name and group; every change notifies observers."""

    def __init__(self) -> None:
        super().__init__()
        self._name = ""
        self._group = ""

    @property
    def name(self):
        return self._name

    @name.setter
    def name(self, value):
        self._name = value
        self.notify_update()

    @property
    def group(self):
        return self._group

    @group.setter
    def group(self, value):
        self._group = value
        self.notify_update()


class StudentView:
    """Compact one-line view of a student."""

    def __init__(self, model: StudentModel) -> None:
        self.model = model
        model.add_observer(self)

    def update(self):
        print("-=-=(view1 update)=-=-")
        self.show()

    def show(self):
        """Print and return the view's text."""
        text = f"Student\nName: {self.model.name} Group: {self.model.group}\n"
        print(text)
        return text


class StudentView2:
    """Detailed multi-line view of a student."""

    def __init__(self, model: StudentModel) -> None:
        self.model = model
        model.add_observer(self)

    def update(self):
        print("-=-=(view2 update)=-=-")
        self.show()

    def show(self):
        """Print and return the view's text."""
        text = (
            f"Student\n--- NAME: {self.model.name}\n"
            f"--- GROUP: {self.model.group}\n"
        )
        print(text)
        return text


class StudentController:
    """Changes the model on behalf of the user."""

    def __init__(self, model: StudentModel, view: StudentView) -> None:
        self.model = model
        self.view = view

    def set_student_name(self, name):
        self.model.name = name

    def set_student_group(self, group):
        self.model.group = group


def demo():
    """Run the model-view-controller demonstration."""
    student = StudentModel()
    student.name = "Robert"
    student.group = "10"
    view = StudentView(student)
    view2 = StudentView2(student)
    view.show()
    view2.show()
    controller = StudentController(student, view)
    controller.set_student_group("20")
    controller.set_student_name("John")