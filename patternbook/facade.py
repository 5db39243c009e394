"""Facade: a simple front for several cooperating subsystems."""

from __future__ import annotations


class Brand:
    """Subsystem that picks the car brand."""

    def brand_1(self):
        return "Brand:ОЧЕНЬ_ХОРОШИЙ\n"

    def brand_2(self):
        return "Brand:ХОРОШИЙ\n"

    def brand_3(self):
        return "Brand:ЧТОБЫ_ЕХАЛ\n"


_ENGINE_TYPES = ("Дизель\n", "Бензин\n", "Гибрид\n")
_ENGINE_POWERS = ("125 л.с.\n", "150 л.с.\n", "250 л.с.\n")
_WHEEL_DIAMETERS = ("16''\n", "18''\n", "20''\n")


def _choose(options: tuple[str, ...], kind: int, what: str) -> str:
    if not isinstance(kind, int) or not 0 <= kind < len(options):
        raise ValueError(f"unknown {what} kind: {kind!r}")
    return options[kind]


class Engine:
    """Subsystem that picks the engine type and power."""

    def engine_type(self, kind):
        """Return the engine type for kind 0, 1 or 2."""
        return _choose(_ENGINE_TYPES, kind, "engine type")

    def engine_power(self, kind):
        """Return the engine power for kind 0, 1 or 2."""
        return _choose(_ENGINE_POWERS, kind, "engine power")


class Wheels:
    """Subsystem that picks the wheel type and diameter."""

    def wheel_type(self, alloy):
        """Return alloy wheels when ``alloy`` is true, pressed steel otherwise."""
        return "Литые\n" if alloy else "Штампованные\n"

    def wheel_diameter(self, kind):
        """Return the wheel diameter for kind 0, 1 or 2."""
        return _choose(_WHEEL_DIAMETERS, kind, "wheel diameter")


class CarConfigurator:
    """Facade offering ready car configurations built from the subsystems."""

    def __init__(
        self,
        brand: Brand | None = None,
        engine: Engine | None = None,
        wheels: Wheels | None = None,
    ) -> None:
        self.brand = brand if brand is not None else Brand()
        self.engine = engine if engine is not None else Engine()
        self.wheels = wheels if wheels is not None else Wheels()

    def lux_car(self):
        return (
            "Luxary автомобиль:\n"
            + self.brand.brand_1()
            + self.engine.engine_type(2)
            + self.engine.engine_power(2)
            + self.wheels.wheel_type(True)
            + self.wheels.wheel_diameter(2)
        )

    def business_car(self):
        return (
            "Business автомобиль:\n"
            + self.brand.brand_2()
            + self.engine.engine_type(0)
            + self.engine.engine_power(1)
            + self.wheels.wheel_type(True)
            + self.wheels.wheel_diameter(1)
        )

    def basic_car(self):
        return (
            "Low-cost автомобиль:\n"
            + self.brand.brand_3()
            + self.engine.engine_type(1)
            + self.engine.engine_power(0)
            + self.wheels.wheel_type(False)
            + self.wheels.wheel_diameter(0)
        )


def car_client_code(configurator):
    """Print all three configurations; return them in order."""
    cars = [
        configurator.lux_car(),
        configurator.business_car(),
        configurator.basic_car(),
    ]
    print("\n".join(cars), end="")
    return cars


class Subsystem1:
    def operation1(self):
        return "Subsystem1: Подсистема_1 готова!\n"

    def operation_n(self):
        return "Subsystem1: Действие_1-N выполнено\n"

    def operation_alt(self):
        return "Subsystem1: Выполнена альтернативная операция-1\n"


class Subsystem2:
    def operation1(self):
        return "Subsystem2: Подсистема_2 готова!\n"

    def operation_z(self):
        return "Subsystem2: Действие_2-Z выполнено\n"

    def operation_alt(self):
        return "Subsystem2: Выполнена альтернативная операция-2\n"


class Facade:
    """Simple interface over two subsystems."""

    def __init__(
        self,
        subsystem1: Subsystem1 | None = None,
        subsystem2: Subsystem2 | None = None,
    ) -> None:
        self.subsystem1 = subsystem1 if subsystem1 is not None else Subsystem1()
        self.subsystem2 = subsystem2 if subsystem2 is not None else Subsystem2()

    def _initialise(self) -> str:
        return (
            "Facade (Фасад) инициализирует подсистемы:\n"
            + self.subsystem1.operation1()
            + self.subsystem2.operation1()
            + "Facade (Фасад) делегирует подсистемам выполнение действий:\n"
        )

    def operation_a(self):
        return (
            self._initialise()
            + self.subsystem1.operation_n()
            + self.subsystem2.operation_z()
        )

    def operation_b(self):
        return (
            self._initialise()
            + self.subsystem1.operation_alt()
            + self.subsystem2.operation_alt()
        )


def client_code(facade):
    """Print both facade operations; return their results."""
    results = [facade.operation_a(), facade.operation_b()]
    print("\n".join(results), end="")
    return results


def demo():
    """Run the facade demonstrations."""
    client_code(Facade(Subsystem1(), Subsystem2()))
    print()
    car_client_code(CarConfigurator(Brand(), Engine(), Wheels()))