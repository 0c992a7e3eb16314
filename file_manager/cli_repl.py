"""
Interactive file manager session: read a line, run the command, report, repeat.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer
from file_manager.entities.command import tokenize
from file_manager.entities.session import SessionState
from file_manager.exceptions import ConfigurationError
from file_manager.use_cases.commands.registry import CommandRegistry

ERROR_MESSAGE = "Operation failed."
INVALID_INPUT = "Invalid input"
PROMPT = "> "
USAGE = "Invalid arguments. Usage: file-manager [--username=<your_username>]"

_USERNAME_ARG = re.compile(r"--username=(.+)")

logger = logging.getLogger(__name__)


def parse_username(argv: list[str]) -> Optional[str]:
    """Return the ``--username=<value>`` argument, rejecting anything else."""
    username: Optional[str] = None
    for arg in argv:
        m = _USERNAME_ARG.fullmatch(arg)
        if not m:
            raise ConfigurationError(USAGE)
        username = m.group(1)
    return username


class FileManagerRepl:
    """Session loop; the only place where command failures are caught."""

    def __init__(
        self,
        registry: CommandRegistry,
        session: SessionState,
        username: str,
        console: Console,
        error_console: Console,
        read_line: Callable[[str], str] = input,
    ):
        self._registry = registry
        self._session = session
        self._username = username
        self._console = console
        self._error_console = error_console
        self._read_line = read_line

    def _show_cwd(self) -> None:
        self._console.print(
            f"You are currently in {self._session.cwd()}", markup=False, highlight=False
        )

    def _goodbye(self) -> None:
        self._console.print(
            f"Thank you for using File Manager, {self._username}, goodbye!",
            markup=False,
            highlight=False,
        )

    def _report(self, message: str) -> None:
        self._error_console.print(Text(message, style="red"))

    def handle_line(self, line: str) -> bool:
        """
        Run one input line.

        Returns:
            False once the session should close, True otherwise
        """
        command = tokenize(line)
        if command.is_exit():
            self._goodbye()
            return False
        if command.is_empty():
            return True

        if command.name not in self._registry:
            self._report(INVALID_INPUT)
        else:
            try:
                self._registry.dispatch(command.name, command.args, self._session)
            except Exception as e:
                logger.debug(f"Command {command.name!r} failed", exc_info=True)
                self._report(f"{ERROR_MESSAGE} {e}")

        self._show_cwd()
        return True

    def run(self) -> int:
        self._console.print(
            f"Welcome to the File Manager, {self._username}!",
            markup=False,
            highlight=False,
        )
        self._show_cwd()
        while True:
            try:
                line = self._read_line(PROMPT)
                if not self.handle_line(line):
                    return 0
            except (EOFError, KeyboardInterrupt):
                # Ctrl+C / Ctrl+D, at the prompt or mid-command
                self._console.print()
                self._goodbye()
                return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        settings = Settings(username=parse_username(argv))
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    container = DependencyContainer(settings)
    repl = FileManagerRepl(
        registry=container.get_command_registry(),
        session=SessionState(settings.start_dir),
        username=settings.username,
        console=container.get_console(),
        error_console=container.get_error_console(),
    )
    return repl.run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
