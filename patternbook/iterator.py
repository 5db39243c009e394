"""Iterator: walk through a collection without exposing how it is stored."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Container(Generic[T]):
    """A generic collection that hands out explicit iterators."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, item):
        self._items.append(item)

    def create_iterator(self):
        """Return a new explicit iterator positioned at the first item."""
        return ContainerIterator(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class ContainerIterator(Generic[T]):
    """Explicit cursor with first/next/is_done/current steps."""

    def __init__(self, items: list[T]) -> None:
        self._items = items
        self._position = 0

    def first(self):
        """Move back to the first item."""
        self._position = 0

    def next(self):
        """Advance to the following item."""
        self._position += 1

    def is_done(self):
        return self._position >= len(self._items)

    def current(self):
        """Return the item under the cursor."""
        if self.is_done():
            raise IndexError("iterator is past the end of the container")
        return self._items[self._position]


@dataclass
class Data:
    """A small value holder used to show containers of custom objects."""

    data: int = 0


@dataclass
class Product:
    """A product card with a name and a quantity."""

    product_name: str
    quantity: int

    def __str__(self) -> str:
        return (
            f"Наименование товара: {self.product_name}, "
            f"Количество: {self.quantity}"
        )


class Cart:
    """A cart of product cards."""

    def __init__(self) -> None:
        self._products: list[Product] = []

    def add_product(self, product):
        self._products.append(product)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def even_positions(self):
        """Yield the products at the second, fourth, ... positions."""
        return islice(self._products, 1, None, 2)


def client_code():
    """Walk containers of ints and of Data; print and return the lines."""
    lines: list[str] = [
        "________________Iterator with int______________________________________"
    ]
    numbers: Container[int] = Container()
    for number in range(5):
        numbers.add(number)
    it = numbers.create_iterator()
    it.first()
    while not it.is_done():
        lines.append(str(it.current()))
        it.next()

    records: Container[Data] = Container()
    for value in (100, 1000, 10000):
        records.add(Data(value))
    lines.append(
        "________________Iterator with custom Class______________________________"
    )
    it2 = records.create_iterator()
    it2.first()
    while not it2.is_done():
        lines.append(str(it2.current().data))
        it2.next()

    for line in lines:
        print(line)
    return lines


def demo():
    """Run the iterator demonstrations."""
    client_code()
    print()
    products = [
        Product("Мышь", 4),
        Product("Монитор", 5),
        Product("SSD", 8),
        Product("Клавиатура", 2),
    ]
    cart = Cart()
    for product in products:
        cart.add_product(product)
    print("***Базовый Итератор***")
    for product in cart:
        print(product)
    print()
    print("***Итератор для четных позиций товара***")
    for product in cart.even_positions():
        print(product)
    print()
    print("***Итератор контейнера list***")
    for product in products:
        print(product)