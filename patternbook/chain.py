"""Chain of responsibility: pass a request along handlers until one takes it."""

from __future__ import annotations

EQUIPMENT = ("Компьютер", "Автомобиль", "Принтер", "Кондиционер")


class Handler:
    """A link in a chain; by default forwards requests to the next link."""

    def __init__(self) -> None:
        self.next_handler: Handler | None = None

    def set_next(self, handler):
        """Link ``handler`` after this one and return it for chaining."""
        self.next_handler = handler
        return handler

    def handle(self, request):
        """Return the answer of the first handler that takes the request, or None."""
        if self.next_handler is not None:
            return self.next_handler.handle(request)
        return None


class _RoleHandler(Handler):
    """Handler that takes exactly one kind of request."""

    wanted: str = ""
    role: str = ""

    def handle(self, request):
        if request == self.wanted:
            return f"{self.role}: Мне нужен {request}.\n"
        return super().handle(request)


class Engineer(_RoleHandler):
    wanted = "Компьютер"
    role = "ИНЖЕНЕР"

    def handle(self, request):
        return super().handle(request)


class Director(_RoleHandler):
    wanted = "Автомобиль"
    role = "ДИРЕКТОР"

    def handle(self, request):
        return super().handle(request)


class HR(_RoleHandler):
    wanted = "Принтер"
    role = "КАДРЫ"

    def handle(self, request):
        return super().handle(request)


def client_code(handler):
    """Offer every piece of equipment to ``handler``; print and return the lines."""
    lines = []
    for item in EQUIPMENT:
        lines.append(f"Client: Кому нужен {item}?")
        result = handler.handle(item)
        if result:
            lines.append("  " + result.rstrip("\n"))
        else:
            lines.append(f"  {item} никому не нужен.")
    for line in lines:
        print(line)
    return lines


class Account:
    """A bank account that hands a payment to its successor when short of money."""

    def __init__(self, name: str = "empty account", balance: float = 0.0) -> None:
        self.name = name
        self.balance = float(balance)
        self.successor: Account | None = None

    def set_next(self, account):
        """Set the account to try when this one cannot pay; return it."""
        self.successor = account
        return account

    def can_pay(self, amount):
        return self.balance >= amount

    def pay(self, amount):
        """Pay from the first account in the chain that can; return it or None."""
        if self.can_pay(amount):
            print(f"Paid {amount:g} using {self.name}.")
            self.balance -= amount
            return self
        if self.successor is not None:
            print(f"Cannot pay using {self.name}. Proceeding ...")
            return self.successor.pay(amount)
        print("None of the accounts have enough balance.")
        return None


class Bank1(Account):
    def __init__(self, balance: float) -> None:
        super().__init__("Bank_1", balance)


class Bank2(Account):
    def __init__(self, balance: float) -> None:
        super().__init__("Bank_2", balance)


class Bank3(Account):
    def __init__(self, balance: float) -> None:
        super().__init__("Bank_3", balance)


def demo():
    """Run the chain of responsibility demonstrations."""
    director = Director()
    engineer = Engineer()
    hr = HR()
    director.set_next(engineer).set_next(hr)
    print("Цепочка: Директор > Инженер > Кадры\n")
    client_code(director)
    print()
    print("Цепочка: Инженер > Кадры\n")
    client_code(engineer)
    print()

    bank_1 = Bank1(100)
    bank_2 = Bank2(200)
    bank_3 = Bank3(300)
    bank_1.set_next(bank_2).set_next(bank_3)
    bank_1.pay(350)