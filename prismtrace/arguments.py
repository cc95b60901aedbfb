"""Command-line argument parsing."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterable, Union

Key = Union[str, int]


class MissingArgument(Exception):
    """A requested argument was not given."""


class HelpArgument(Exception):
    """Help was asked for."""


class ArgumentsLoader:
    """Splits arguments into ``-flag [value]`` pairs and positional values."""

    def __init__(self) -> None:
        self._flags: dict[str, str] = {}
        self._positional: list[str] = []

    def parse(self, argv: Iterable[str]) -> None:
        """Read arguments (without the program name)."""
        pending = deque(argv)
        while pending:
            arg = pending.popleft()
            if arg.startswith("-"):
                key = arg[1:]
                if pending and not pending[0].startswith("-"):
                    self._flags[key] = pending.popleft()
                else:
                    self._flags[key] = ""
            else:
                self._positional.append(arg)

    def get(self, key: Key) -> str:
        """A flag's value by name, or a positional value by index."""
        if isinstance(key, int):
            if not self.has(key):
                raise MissingArgument("Positional argument not found")
            return self._positional[key]
        if not self.has(key):
            raise MissingArgument("Argument not found")
        return self._flags[key]

    def has(self, key: Key) -> bool:
        if isinstance(key, int):
            return 0 <= key < len(self._positional)
        return key in self._flags

    def set(self, key: str, value: str) -> None:
        self._flags[key] = value

    def clear(self) -> None:
        self._flags.clear()
        self._positional.clear()

    def remove(self, key: str) -> None:
        self._flags.pop(key, None)

    def visit(self, visitor: Callable[[str, str], None]) -> None:
        """Call ``visitor(key, value)`` for positionals (key "") then flags by name."""
        for value in self._positional:
            visitor("", value)
        for key in sorted(self._flags):
            visitor(key, self._flags[key])

    def __str__(self) -> str:
        lines = ["Positional parameters:"]
        lines.extend(f"{index} => {value}" for index, value in enumerate(self._positional))
        lines.append("Flag parameters:")
        lines.extend(f"{key} => {self._flags[key]}" for key in sorted(self._flags))
        return "\n".join(lines) + "\n"


@dataclass
class Parameters:
    """The program's options, read from the command line."""

    loader: ArgumentsLoader = field(default_factory=ArgumentsLoader)
    gui: bool = False
    help: bool = False
    output_file: str = ""
    scene_file: str = ""

    def load(self, argv: Iterable[str]) -> None:
        loader = self.loader
        loader.parse(argv)
        self.gui = loader.has("gui")
        self.help = loader.has("help") or loader.has("h")
        if loader.has("out"):
            self.output_file = loader.get("out")
        if loader.has("o"):
            self.output_file = loader.get("o")
        if not self.gui and not self.output_file:
            self.output_file = "output.bmp"
        if self.help:
            raise HelpArgument("Help:")
        if not loader.has(0):
            raise MissingArgument("Scene file not found")
        self.scene_file = loader.get(0)