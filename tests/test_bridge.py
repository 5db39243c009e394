import pytest

from patternbook.bridge import (
    Abstraction,
    ConcreteImplementationA,
    ConcreteImplementationB,
    ExtendedAbstraction,
    Implementation,
    client_code,
)


@pytest.mark.parametrize("impl_cls", [ConcreteImplementationA, ConcreteImplementationB])
def test_abstraction_appends_implementation(impl_cls):
    impl = impl_cls()
    result = Abstraction(impl).operation()
    assert result == "Abstraction: Базовая операция:\n" + impl.operation_implementation()


def test_extended_abstraction_prefix():
    impl = ConcreteImplementationB()
    result = ExtendedAbstraction(impl).operation()
    assert result.startswith("ExtendedAbstraction: Расширенная операция:\n")
    assert result.endswith(impl.operation_implementation())


def test_implementation_a_text():
    assert ConcreteImplementationA().operation_implementation() == (
        "ConcreteImplementationA: Результат работы для реализации A.\n"
    )


def test_implementation_is_abstract():
    with pytest.raises(TypeError):
        Implementation()


def test_client_code_prints(capsys):
    result = client_code(Abstraction(ConcreteImplementationA()))
    assert capsys.readouterr().out == result