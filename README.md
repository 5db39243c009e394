# patternbook

A collection of small, self-contained examples of classic design patterns.
Each pattern lives in its own module and can be imported, used and
inspected on its own. Each module also has a `demo()` function that runs
the example scenario and prints what happens.

Many of the messages the examples print are in Russian.

## Modules

| Group        | Modules |
|--------------|---------|
| Creational   | `builder` |
| Structural   | `adapter`, `bridge`, `composite`, `decorator`, `facade`, `flyweight`, `proxy` |
| Behavioural  | `chain`, `command`, `iterator`, `mediator`, `observer`, `visitor` |
| Architecture | `mvc` |

Most methods that print something also return it, so results can be used
or checked directly.

## Examples

Builder: a director runs the building steps, the builder hands out the
product and starts a fresh one.

```python
from patternbook.builder import ConcreteBuilder1, Director

builder = ConcreteBuilder1()
director = Director(builder)
director.build_full_featured_product()
print(builder.get_product().list_parts())
# Product parts: PartA1, PartB1, PartC1
```

Composite: leaves and branches share one interface.

```python
from patternbook.composite import Composite, Leaf

tree = Composite()
tree.add(Leaf())
tree.add(Leaf())
print(tree.operation())
# Ветка(Лист+Лист)
```

Chain of responsibility: handlers are linked with `set_next`, which
returns the handler it was given; `handle` returns `None` when nobody
takes the request.

```python
from patternbook.chain import HR, Director, Engineer

director = Director()
director.set_next(Engineer()).set_next(HR())
print(director.handle("Принтер"))
# КАДРЫ: Мне нужен Принтер.
print(director.handle("Кондиционер"))
# None
```

Visitor: a visitor computes a value for each kind of shape.

```python
from patternbook.visitor import PerimeterVisitor, Rectangle

print(Rectangle(10, 4).accept(PerimeterVisitor()))
# 28
```

To run the full scenario for any pattern, call its module's demo:

```python
from patternbook import observer

observer.demo()
```

## What the package does not do

The package installs no command-line program; the scenarios are run from
Python through each module's `demo()` function. Apart from `builder`, it
holds no examples of creational patterns.

## Tests

The test suite uses pytest. Install the `test` extra to get it.