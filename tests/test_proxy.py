import pytest

from patternbook.proxy import Proxy, RealSubject, Subject, client_code_1, client_code_2


def test_real_subject_request(capsys):
    assert RealSubject().request() == "RealSubject: Получен запрос."
    assert capsys.readouterr().out == "RealSubject: Получен запрос.\n"


def test_subject_is_abstract():
    with pytest.raises(TypeError):
        Subject()


def test_proxy_forwards_and_logs(capsys):
    proxy = Proxy(RealSubject())
    result = proxy.request()
    out = capsys.readouterr().out
    assert result == RealSubject().request()
    lines = out.splitlines()
    assert lines[0] == "Proxy: Проверка прав доступа к сервису."
    assert lines[1] == "RealSubject: Получен запрос."
    assert lines[2].startswith("Proxy: Регистрация времени обращения к сервису: ")
    assert len(proxy.access_log) == 1


def test_access_log_grows_in_order():
    proxy = Proxy(RealSubject())
    client_code_1(proxy, 0)
    client_code_2(proxy, 0)
    assert len(proxy.access_log) == 2
    assert proxy.access_log[0] <= proxy.access_log[1]


def test_client_code_with_real_subject():
    assert client_code_1(RealSubject(), 0) == "RealSubject: Получен запрос."
    assert client_code_2(RealSubject(), 0) == "RealSubject: Получен запрос."


def test_proxy_holds_its_own_copy():
    real = RealSubject()
    proxy = Proxy(real)
    assert proxy._real_subject is not real
    assert isinstance(proxy._real_subject, RealSubject)