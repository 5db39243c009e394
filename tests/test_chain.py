import pytest

from patternbook.chain import (
    EQUIPMENT,
    HR,
    Account,
    Bank1,
    Bank2,
    Bank3,
    Director,
    Engineer,
    Handler,
    client_code,
)


@pytest.fixture
def chain():
    director = Director()
    engineer = Engineer()
    hr = HR()
    director.set_next(engineer).set_next(hr)
    return director, engineer, hr


def test_set_next_returns_given_handler():
    director = Director()
    engineer = Engineer()
    assert director.set_next(engineer) is engineer
    assert director.next_handler is engineer


def test_each_role_takes_its_request(chain):
    director, _, _ = chain
    assert director.handle("Компьютер").startswith("ИНЖЕНЕР: Мне нужен ")
    assert director.handle("Автомобиль").startswith("ДИРЕКТОР: Мне нужен ")
    assert director.handle("Принтер").startswith("КАДРЫ: Мне нужен ")


def test_result_mentions_request(chain):
    director, _, _ = chain
    result = director.handle("Принтер")
    assert "Принтер" in result
    assert result.endswith(".\n")


def test_unwanted_request_returns_none(chain):
    director, _, _ = chain
    assert director.handle("Кондиционер") is None


def test_chain_started_midway_skips_earlier_links(chain):
    _, engineer, _ = chain
    assert engineer.handle("Автомобиль") is None
    assert engineer.handle("Принтер").startswith("КАДРЫ")


def test_bare_handler_returns_none():
    assert Handler().handle("Компьютер") is None


def test_client_code_two_lines_per_item(chain, capsys):
    director, _, _ = chain
    lines = client_code(director)
    assert len(lines) == 2 * len(EQUIPMENT)
    assert lines[-1] == "  Кондиционер никому не нужен."
    assert capsys.readouterr().out.splitlines() == lines


def test_client_code_from_engineer(chain):
    _, engineer, _ = chain
    lines = client_code(engineer)
    assert lines[3] == "  Автомобиль никому не нужен."


def test_payment_moves_down_chain():
    bank_1, bank_2, bank_3 = Bank1(100), Bank2(200), Bank3(300)
    bank_1.set_next(bank_2).set_next(bank_3)
    payer = bank_1.pay(250)
    assert payer is bank_3
    assert bank_3.balance == 300 - 250
    assert bank_1.balance == 100
    assert bank_2.balance == 200


def test_payment_uses_first_capable_account():
    bank_1, bank_2 = Bank1(100), Bank2(200)
    bank_1.set_next(bank_2)
    assert bank_1.pay(50) is bank_1
    assert bank_1.balance == 100 - 50


def test_payment_fails_when_no_account_can_pay(capsys):
    bank_1, bank_2 = Bank1(100), Bank2(200)
    bank_1.set_next(bank_2)
    assert bank_1.pay(350) is None
    assert bank_1.balance == 100
    assert bank_2.balance == 200
    assert "None of the accounts have enough balance." in capsys.readouterr().out


def test_empty_account_defaults():
    account = Account()
    assert account.name == "empty account"
    assert account.can_pay(0)
    assert not account.can_pay(1)