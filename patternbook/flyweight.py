"""Flyweight: share common state between many small objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SharedState:
    """State that many cars have in common."""

    brand: str
    model: str
    color: str

    def __str__(self) -> str:
        return f"[ {self.brand} , {self.model} , {self.color} ]"

    @property
    def key(self) -> str:
        return f"{self.brand}_{self.model}_{self.color}"


@dataclass(frozen=True)
class UniqueState:
    """State that belongs to a single car."""

    owner: str
    plates: str

    def __str__(self) -> str:
        return f"[ {self.owner} , {self.plates} ]"


class Flyweight:
    """Holds a shared state and takes the unique state per call."""

    def __init__(self, shared_state: SharedState) -> None:
        self._shared_state = shared_state

    @property
    def shared_state(self) -> SharedState:
        return self._shared_state

    def operation(self, unique_state):
        """Print and return a line showing both states."""
        line = (
            f"Flyweight: Displaying shared ({self._shared_state}) "
            f"and unique ({unique_state}) state."
        )
        print(line)
        return line


class FlyweightFactory:
    """Creates flyweights and reuses existing ones for equal shared state."""

    def __init__(self, shared_states=()) -> None:
        self._flyweights: dict[str, Flyweight] = {}
        for state in shared_states:
            self._flyweights.setdefault(state.key, Flyweight(state))

    def get_flyweight(self, shared_state):
        """Return the flyweight for ``shared_state``, creating it if needed."""
        key = shared_state.key
        if key not in self._flyweights:
            print("FlyweightFactory: Can't find a flyweight, creating new one.")
            self._flyweights[key] = Flyweight(shared_state)
        else:
            print("FlyweightFactory: Reusing existing flyweight.")
        return self._flyweights[key]

    def keys(self):
        """Return the keys of all stored flyweights."""
        return list(self._flyweights)

    def __len__(self) -> int:
        return len(self._flyweights)

    def list_flyweights(self):
        """Print the stored flyweight keys; return them."""
        keys = self.keys()
        print(f"\nFlyweightFactory: I have {len(keys)} flyweights:")
        for key in keys:
            print(key)
        return keys


def add_car_to_police_database(factory, plates, owner, brand, model, color):
    """Register a car through the factory; return the flyweight's report."""
    print("\nClient: Adding a car to database.")
    flyweight = factory.get_flyweight(SharedState(brand, model, color))
    return flyweight.operation(UniqueState(owner, plates))


@dataclass(eq=False)
class Tea:
    """A batch of tea."""


class TeaMaker:
    """Makes one batch of tea per preference and reuses it."""

    def __init__(self) -> None:
        self._available: dict[str, Tea] = {}

    def make(self, preference):
        return self._available.setdefault(preference, Tea())

    def preference_count(self):
        return len(self._available)


class TeaShop:
    """Takes orders per table and serves tea from a shared maker."""

    def __init__(self, maker: TeaMaker) -> None:
        self.maker = maker
        self.orders: dict[int, Tea] = {}

    def take_order(self, preference, table):
        self.orders[table] = self.maker.make(preference)

    def serve(self):
        """Serve every table; return the table numbers served."""
        tables = list(self.orders)
        for table in tables:
            print(f"Serving tea to table {table}")
        return tables

    def preference_count(self):
        return self.maker.preference_count()


class Character:
    """A character glyph; its position is supplied from outside."""

    def __init__(self, intrinsic_state: str) -> None:
        self.intrinsic_state = intrinsic_state

    def draw(self, extrinsic_state):
        """Print and return a line describing the drawing."""
        line = (
            f"Drawing character '{self.intrinsic_state}' "
            f"at position {extrinsic_state}"
        )
        print(line)
        return line


class CharacterFactory:
    """Hands out one shared Character per key."""

    def __init__(self) -> None:
        self._characters: dict[str, Character] = {}

    def get_character(self, key):
        if key not in self._characters:
            self._characters[key] = Character(key)
        return self._characters[key]


def demo():
    """Run the flyweight demonstrations."""
    factory = FlyweightFactory(
        [
            SharedState("Chevrolet", "Camaro2018", "pink"),
            SharedState("Mercedes Benz", "C300", "black"),
            SharedState("Mercedes Benz", "C500", "red"),
            SharedState("BMW", "M5", "red"),
            SharedState("BMW", "X6", "white"),
        ]
    )
    factory.list_flyweights()
    add_car_to_police_database(factory, "PLATE-0001", "James Doe", "BMW", "M5", "red")
    add_car_to_police_database(factory, "PLATE-0001", "James Doe", "BMW", "X1", "red")
    factory.list_flyweights()
    print()

    shop = TeaShop(TeaMaker())
    print(shop.preference_count())
    shop.take_order("half sugar", 1)
    shop.take_order("with milk", 2)
    shop.take_order("with boba", 5)
    print(shop.preference_count())
    shop.take_order("half sugar", 4)
    print(shop.preference_count())
    shop.serve()
    print()

    characters = CharacterFactory()
    for position, key in enumerate("ABC"):
        characters.get_character(key).draw(position)