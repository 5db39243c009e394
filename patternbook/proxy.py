"""Proxy: a stand-in that checks access and logs calls to the real subject."""

from __future__ import annotations

import copy
import time
from abc import ABC, abstractmethod
from datetime import datetime


class Subject(ABC):
    """Interface shared by the real subject and its proxy."""

    @abstractmethod
    def request(self):
        """Handle a request."""


class RealSubject(Subject):
    def request(self):
        result = "RealSubject: Получен запрос."
        print(result)
        return result


class Proxy(Subject):
    """Checks access, forwards to its own copy of the real subject, logs."""

    def __init__(self, real_subject: RealSubject) -> None:
        self._real_subject = copy.copy(real_subject)
        self.access_log: list[datetime] = []

    def _check_access(self) -> bool:
        print("Proxy: Проверка прав доступа к сервису.")
        return True

    def _log_access(self) -> None:
        now = datetime.now()
        self.access_log.append(now)
        print(f"Proxy: Регистрация времени обращения к сервису: {now.ctime()}\n")

    def request(self):
        """Forward the request when access is granted; return its result."""
        if not self._check_access():
            return None
        result = self._real_subject.request()
        self._log_access()
        return result


def client_code_1(subject, delay=1.0):
    """Wait ``delay`` seconds, then send a request to ``subject``."""
    time.sleep(delay)
    return subject.request()


def client_code_2(subject, delay=2.0):
    """Wait ``delay`` seconds, then send a request to ``subject``."""
    time.sleep(delay)
    return subject.request()


def demo():
    """Run the proxy demonstration."""
    print("Client: Выполненение клиентского кода на реальном сервисе:")
    real_subject = RealSubject()
    client_code_1(real_subject)
    print()
    print("Client: Выполнение клиентсокго кода чере Заместителя (Proxy):")
    proxy = Proxy(real_subject)
    client_code_1(proxy)
    print("Client: Выполнение клиентсокго кода чере Заместителя (Proxy):")
    client_code_2(proxy)