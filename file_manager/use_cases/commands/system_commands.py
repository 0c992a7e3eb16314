"""
Commands ``os`` and ``help``.
"""

import logging
from typing import Callable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from file_manager.entities.session import SessionState
from file_manager.ports.commands.commands_port import CommandSpec
from file_manager.use_cases.commands.base import BaseCommandsHandler
from file_manager.use_cases.system.os_info import OsInfoUseCase


class SystemCommandsHandler(BaseCommandsHandler):
    """Handler for host information and command help."""

    def __init__(
        self,
        os_info_uc: OsInfoUseCase,
        commands_provider: Callable[[], list[CommandSpec]],
        console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the system commands handler.

        Args:
            os_info_uc: Use case for ``os``
            commands_provider: Returns every registered command, for ``help``
            console: Console receiving command output
            logger: Logger instance to use for logging
        """
        super().__init__(console, logger)
        self._os_info_uc = os_info_uc
        self._commands_provider = commands_provider

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "os",
                "usage": "os --EOL|--cpus|--homedir|--username|--architecture",
                "description": "Print a fact about the host system.",
            },
            {
                "name": "help",
                "usage": "help",
                "description": "Show this list of commands.",
            },
        ]

    def dispatch(self, name: str, args: Sequence[str], session: SessionState) -> None:
        if name == "os":
            self._expect_args(
                args,
                1,
                "Invalid input. 'os' command requires a single parameter (--EOL, --cpus, --homedir, --username, --architecture)",
            )
            for line in self._os_info_uc.execute(args[0]):
                self._say(line)
            return

        if name == "help":
            self._expect_args(args, 0, "The 'help' command does not accept arguments")
            table = Table(title="Commands", box=box.MINIMAL_DOUBLE_HEAD)
            table.add_column("Command", style="cyan", no_wrap=True)
            table.add_column("Description")
            for spec in self._commands_provider():
                table.add_row(spec["usage"], spec["description"])
            table.add_row(".exit", "Leave the file manager.")
            self._console.print(table)
            return

        raise self._unknown(name)
