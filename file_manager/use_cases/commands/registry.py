"""
Closed registry mapping command names to the handler that runs them.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from file_manager.entities.session import SessionState
from file_manager.ports.commands.commands_port import CommandsHandlerPort, CommandSpec


class CommandRegistry:
    """Fixed name -> handler table, built once at startup."""

    def __init__(self, handlers: Iterable[CommandsHandlerPort]) -> None:
        table: dict[str, CommandsHandlerPort] = {}
        specs: list[CommandSpec] = []
        for handler in handlers:
            for spec in handler.available_commands():
                if spec["name"] in table:
                    raise ValueError(f"Command registered twice: {spec['name']}")
                table[spec["name"]] = handler
                specs.append(spec)
        self._table: Mapping[str, CommandsHandlerPort] = MappingProxyType(table)
        self._specs = tuple(specs)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def names(self) -> list[str]:
        return list(self._table)

    def available_commands(self) -> list[CommandSpec]:
        return list(self._specs)

    def dispatch(self, name: str, args: Sequence[str], session: SessionState) -> None:
        """
        Run a registered command.

        Raises:
            ValueError: If no handler is registered for the name
        """
        handler = self._table.get(name)
        if handler is None:
            raise ValueError(f"No handler found for command: {name}")
        handler.dispatch(name, args, session)
