import argparse
import functools
from typing import Any, Protocol


class CommandHandler(Protocol):
    def __call__(self, namespace: argparse.Namespace) -> dict[str, Any]:
        ...


class CommandDispatcher:
    def __init__(self) -> None:
        self._commands: dict[str, CommandHandler] = {}

    def dispatch(self, name: str, namespace: argparse.Namespace) -> dict[str, Any]:
        command = self._commands.get(name)
        if command is None:
            raise RuntimeError(f"Unknown '{name}' Command")
        return command(namespace)

    def command(self, name: str):
        def decorator(func: CommandHandler):
            if name in self._commands:
                raise RuntimeError(f"Command already registered for '{name}'")

            @functools.wraps(func)
            def wrapper(namespace: argparse.Namespace) -> dict[str, Any]:
                return func(namespace)

            self._commands[name] = wrapper

            return wrapper

        return decorator
