"""
Port and types for interactive commands, independent of the terminal front end.
"""

from abc import ABC, abstractmethod
from typing import Sequence, TypedDict

from file_manager.entities.session import SessionState


class CommandSpec(TypedDict):
    """Specification of a command a user can type."""

    name: str
    usage: str
    description: str


class CommandsHandlerPort(ABC):
    """
    Port interface for handling typed commands.

    This port exposes available commands and dispatches invocations to the
    appropriate use cases.
    """

    @abstractmethod
    def available_commands(self) -> list[CommandSpec]:
        """
        Get a list of available commands.

        Returns:
            List of command specifications
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, args: Sequence[str], session: SessionState) -> None:
        """
        Run a command.

        Args:
            name: Name of the command to run
            args: Arguments as typed, in order
            session: Session whose current directory the command reads or changes

        Raises:
            ValueError: If the command name is unknown to this handler
        """
        pass
