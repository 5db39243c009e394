import pytest

from patternbook.visitor import (
    PI,
    AreaVisitor,
    Circle,
    Component,
    ConcreteComponentA,
    ConcreteComponentB,
    ConcreteVisitor1,
    ConcreteVisitor2,
    PerimeterVisitor,
    Rectangle,
    Shape,
    ShapeVisitor,
    Square,
    Visitor,
    client_code,
    demo,
)


def test_component_specific_methods():
    assert ConcreteComponentA().exclusive_method_of_concrete_component_a() == "A"
    assert ConcreteComponentB().special_method_of_concrete_component_b() == "B"


def test_client_code_with_visitor1(capsys):
    results = client_code([ConcreteComponentA(), ConcreteComponentB()], ConcreteVisitor1())
    assert results == ["A + ConcreteVisitor1", "B + ConcreteVisitor1"]
    assert capsys.readouterr().out.splitlines() == results


def test_client_code_with_visitor2():
    results = client_code([ConcreteComponentB(), ConcreteComponentA()], ConcreteVisitor2())
    assert results == ["B + ConcreteVisitor2", "A + ConcreteVisitor2"]


def test_accept_dispatches_by_class():
    class Recorder(Visitor):
        def __init__(self):
            self.seen = []

        def visit_concrete_component_a(self, element):
            self.seen.append(("a", element))
            return "a"

        def visit_concrete_component_b(self, element):
            self.seen.append(("b", element))
            return "b"

    a, b = ConcreteComponentA(), ConcreteComponentB()
    recorder = Recorder()
    assert client_code([b, a], recorder) == ["b", "a"]
    assert recorder.seen == [("b", b), ("a", a)]


@pytest.mark.parametrize("cls", [Visitor, Component, ShapeVisitor, Shape])
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()


def test_rectangle_area_and_perimeter():
    shape = Rectangle(10, 4)
    assert shape.accept(AreaVisitor()) == 40
    assert shape.accept(PerimeterVisitor()) == 28


def test_circle_perimeter_uses_source_pi():
    assert Circle(10).accept(PerimeterVisitor()) == pytest.approx(62.8)
    assert PI == 3.14


def test_circle_area_grows_with_square_of_radius():
    visitor = AreaVisitor()
    assert Circle(4).accept(visitor) == pytest.approx(4 * Circle(2).accept(visitor))


def test_square_perimeter_is_linear():
    visitor = PerimeterVisitor()
    assert Square(10).accept(visitor) == 2 * Square(5).accept(visitor)


def test_visitor_keeps_last_value():
    visitor = AreaVisitor()
    result = Rectangle(3, 7).accept(visitor)
    assert visitor.value == result
    second = Square(5).accept(visitor)
    assert visitor.value == second


def test_shapes_are_values():
    assert Rectangle(2, 3) == Rectangle(2, 3)
    assert Circle(1) != Circle(2)


def test_demo_output(capsys):
    demo()
    out = capsys.readouterr().out
    assert "A + ConcreteVisitor2" in out
    assert "Площадь фигуры Rectangle равна: 40" in out
    assert "Периметр фигуы Rectangle равен: 28" in out