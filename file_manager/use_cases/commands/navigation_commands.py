"""
Commands ``up``, ``cd`` and ``ls`` mapped to the navigation use cases.
"""

import logging
import os
from types import ModuleType
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from file_manager.entities.session import SessionState
from file_manager.ports.commands.commands_port import CommandSpec
from file_manager.use_cases.commands.base import BaseCommandsHandler
from file_manager.use_cases.navigation.change_directory import (
    ChangeDirectoryUseCase,
    GoUpUseCase,
)
from file_manager.use_cases.navigation.list_directory import ListDirectoryUseCase

EMPTY_DIRECTORY = "(empty directory)"


class NavigationCommandsHandler(BaseCommandsHandler):
    """Handler for commands that read or move the current directory."""

    def __init__(
        self,
        go_up_uc: GoUpUseCase,
        change_directory_uc: ChangeDirectoryUseCase,
        list_directory_uc: ListDirectoryUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
        pathmod: ModuleType = os.path,
    ):
        """
        Initialize the navigation commands handler.

        Args:
            go_up_uc: Use case for ``up``
            change_directory_uc: Use case for ``cd``
            list_directory_uc: Use case for ``ls``
            console: Console receiving command output
            logger: Logger instance to use for logging
            pathmod: Path flavour used to resolve user input
        """
        super().__init__(console, logger, pathmod)
        self._go_up_uc = go_up_uc
        self._change_directory_uc = change_directory_uc
        self._list_directory_uc = list_directory_uc

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "up",
                "usage": "up",
                "description": "Go to the parent directory (no-op at the root).",
            },
            {
                "name": "cd",
                "usage": "cd path_to_directory",
                "description": "Change to a directory, relative or absolute.",
            },
            {
                "name": "ls",
                "usage": "ls",
                "description": "List the current directory, folders first.",
            },
        ]

    def dispatch(self, name: str, args: Sequence[str], session: SessionState) -> None:
        if name == "up":
            self._expect_args(args, 0, "The 'up' command does not accept arguments")
            session.cwd(self._go_up_uc.execute(session.cwd()))
            return

        if name == "cd":
            self._expect_args(
                args,
                1,
                "Invalid input: 'cd' command expects exactly one argument (path_to_directory)",
            )
            target = self._resolve(args[0], session.cwd())
            session.cwd(self._change_directory_uc.execute(target, raw_target=args[0]))
            return

        if name == "ls":
            self._expect_args(args, 0, "The 'ls' command does not accept arguments")
            entries = self._list_directory_uc.execute(session.cwd())
            if not entries:
                self._say(EMPTY_DIRECTORY)
            else:
                table = Table(box=box.SQUARE)
                table.add_column("(index)", justify="right")
                table.add_column("Name")
                table.add_column("Type")
                for index, entry in enumerate(entries):
                    details = entry.get_details()
                    table.add_row(str(index), Text(details["Name"]), details["Type"])
                self._console.print(table)
            self._console.print()
            return

        raise self._unknown(name)
