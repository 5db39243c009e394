"""Command: wrap requests as objects that an invoker runs."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """A request packaged as an object."""

    @abstractmethod
    def execute(self):
        """Carry out the request; return what was reported."""


class SimpleCommand(Command):
    """Does a simple job on its own."""

    def __init__(self, payload: str) -> None:
        self.payload = payload

    def execute(self):
        line = (
            "SimpleCommand: See, I can do simple things like printing "
            f"({self.payload})"
        )
        print(line)
        return line


class Receiver:
    """Holds the business logic that complex commands delegate to."""

    def do_something(self, a):
        line = f"Receiver: Working on ({a}.)"
        print(line)
        return line

    def do_something_else(self, b):
        line = f"Receiver: Also working on ({b}.)"
        print(line)
        return line


class ComplexCommand(Command):
    """Delegates its work to a receiver."""

    def __init__(self, receiver: Receiver, a: str, b: str) -> None:
        self.receiver = receiver
        self.a = a
        self.b = b

    def execute(self):
        header = "ComplexCommand: Complex stuff should be done by a receiver object."
        print(header)
        lines = [
            header,
            self.receiver.do_something(self.a),
            self.receiver.do_something_else(self.b),
        ]
        return "\n".join(lines)


class Invoker:
    """Runs optional commands before and after its own work."""

    def __init__(
        self, on_start: Command | None = None, on_finish: Command | None = None
    ) -> None:
        self.on_start = on_start
        self.on_finish = on_finish

    def do_something_important(self):
        """Run the work with its hooks; return every line reported."""
        lines: list[str] = []

        def say(text: str) -> None:
            print(text)
            lines.append(text)

        say("Invoker: Does anybody want something done before I begin?")
        if self.on_start is not None:
            lines.extend(self.on_start.execute().split("\n"))
        say("Invoker: ...doing something really important...")
        say("Invoker: Does anybody want something done after I finish?")
        if self.on_finish is not None:
            lines.extend(self.on_finish.execute().split("\n"))
        return lines


class Device(ABC):
    """A device a remote control can operate."""

    @abstractmethod
    def on(self):
        """Switch on."""

    @abstractmethod
    def off(self):
        """Switch off."""

    @abstractmethod
    def up(self):
        """Increase the level."""

    @abstractmethod
    def down(self):
        """Decrease the level."""


class _ReportingDevice(Device):
    """Device that reports each action with a fixed message."""

    messages: dict[str, str] = {}

    def _report(self, action: str) -> str:
        line = self.messages[action]
        print(line)
        return line

    def on(self):
        return self._report("on")

    def off(self):
        return self._report("off")

    def up(self):
        return self._report("up")

    def down(self):
        return self._report("down")


class Light(_ReportingDevice):
    messages = {
        "on": "Turn on light",
        "off": "Turn off light",
        "up": "Increase brightness",
        "down": "Decrease brightness",
    }


class Speaker(_ReportingDevice):
    messages = {
        "on": "Turn on speaker",
        "off": "Turn off speaker",
        "up": "Increase volume",
        "down": "Decrease volume",
    }


class _DeviceCommand(Command):
    def __init__(self, device: Device) -> None:
        self.device = device


class OnCommand(_DeviceCommand):
    def execute(self):
        return self.device.on()


class OffCommand(_DeviceCommand):
    def execute(self):
        return self.device.off()


class UpCommand(_DeviceCommand):
    def execute(self):
        return self.device.up()


class DownCommand(_DeviceCommand):
    def execute(self):
        return self.device.down()


class RemoteControl:
    """Invoker offering one button per command."""

    def __init__(
        self,
        on_command: Command,
        off_command: Command,
        up_command: Command,
        down_command: Command,
    ) -> None:
        self.on_command = on_command
        self.off_command = off_command
        self.up_command = up_command
        self.down_command = down_command

    def click_on(self):
        return self.on_command.execute()

    def click_off(self):
        return self.off_command.execute()

    def click_up(self):
        return self.up_command.execute()

    def click_down(self):
        return self.down_command.execute()


def remote_client_code(device):
    """Build a remote for ``device`` and press on, up, down, off; return results."""
    remote = RemoteControl(
        OnCommand(device), OffCommand(device), UpCommand(device), DownCommand(device)
    )
    return [
        remote.click_on(),
        remote.click_up(),
        remote.click_down(),
        remote.click_off(),
    ]


def demo():
    """Run the command demonstrations."""
    invoker = Invoker(
        SimpleCommand("Say Hi!"),
        ComplexCommand(Receiver(), "Send email", "Save report"),
    )
    invoker.do_something_important()
    print()
    remote_client_code(Light())
    print()
    remote_client_code(Speaker())