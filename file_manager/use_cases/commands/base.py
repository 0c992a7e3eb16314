"""
Shared plumbing for command handlers: arity checks, path resolution, output.
"""

import logging
import os
from types import ModuleType
from typing import Optional, Sequence

from rich.console import Console

from file_manager.entities.session import SessionState
from file_manager.exceptions import UsageError
from file_manager.ports.commands.commands_port import CommandsHandlerPort
from file_manager.utils.paths import resolve_path


class BaseCommandsHandler(CommandsHandlerPort):
    """Base class for handlers writing their results to a rich console."""

    def __init__(
        self,
        console: Console,
        logger: Optional[logging.Logger] = None,
        pathmod: ModuleType = os.path,
    ):
        self._console = console
        self._logger = logger or logging.getLogger(__name__)
        self._pathmod = pathmod

    # ------------------------- internal helpers -------------------------
    @staticmethod
    def _expect_args(
        args: Sequence[str], count: int, message: str, at_least: bool = False
    ) -> None:
        """Raise UsageError unless ``args`` has ``count`` items (or more, with ``at_least``)."""
        ok = len(args) >= count if at_least else len(args) == count
        if not ok:
            raise UsageError(message)

    def _resolve(self, raw_path: str, base_dir: str) -> str:
        return resolve_path(raw_path, base_dir, self._pathmod)

    def _say(self, text: str) -> None:
        # Paths may contain [brackets]; never treat them as markup.
        self._console.print(text, markup=False, highlight=False)

    def _unknown(self, name: str) -> ValueError:
        return ValueError(f"Unknown command: {name}")

    def dispatch(self, name: str, args: Sequence[str], session: SessionState) -> None:
        raise self._unknown(name)
