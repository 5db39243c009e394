import pytest

from patternbook.iterator import Cart, Container, Data, Product, client_code


def _walk(iterator):
    seen = []
    iterator.first()
    while not iterator.is_done():
        seen.append(iterator.current())
        iterator.next()
    return seen


def test_explicit_iterator_visits_all_in_order():
    container = Container()
    for number in range(5):
        container.add(number)
    assert _walk(container.create_iterator()) == list(range(5))


def test_explicit_iterator_matches_python_iteration():
    container = Container()
    for value in (100, 1000, 10000):
        container.add(Data(value))
    assert _walk(container.create_iterator()) == list(container)


def test_first_rewinds():
    container = Container()
    container.add("x")
    container.add("y")
    it = container.create_iterator()
    it.next()
    assert it.current() == "y"
    it.first()
    assert it.current() == "x"


def test_current_past_end_raises():
    it = Container().create_iterator()
    assert it.is_done()
    with pytest.raises(IndexError):
        it.current()


def test_data_default():
    assert Data().data == 0


def test_product_text():
    assert str(Product("Мышь", 4)) == "Наименование товара: Мышь, Количество: 4"


@pytest.fixture
def cart():
    result = Cart()
    for name, quantity in (("Мышь", 4), ("Монитор", 5), ("SSD", 8), ("Клавиатура", 2)):
        result.add_product(Product(name, quantity))
    return result


def test_cart_iterates_all(cart):
    assert [p.product_name for p in cart] == ["Мышь", "Монитор", "SSD", "Клавиатура"]


def test_cart_even_positions(cart):
    assert [p.product_name for p in cart.even_positions()] == ["Монитор", "Клавиатура"]


def test_even_positions_of_empty_cart():
    assert list(Cart().even_positions()) == []


def test_client_code_lines(capsys):
    lines = client_code()
    assert lines[1:6] == ["0", "1", "2", "3", "4"]
    assert lines[-3:] == ["100", "1000", "10000"]
    assert capsys.readouterr().out.splitlines() == lines