"""
Command ``hash`` mapped to the hashing use case.
"""

import logging
import os
from types import ModuleType
from typing import Optional, Sequence

from rich.console import Console

from file_manager.entities.session import SessionState
from file_manager.ports.commands.commands_port import CommandSpec
from file_manager.use_cases.commands.base import BaseCommandsHandler
from file_manager.use_cases.files.hash_file import HashFileUseCase


class HashCommandsHandler(BaseCommandsHandler):
    def __init__(
        self,
        hash_file_uc: HashFileUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
        pathmod: ModuleType = os.path,
    ):
        super().__init__(console, logger, pathmod)
        self._hash_file_uc = hash_file_uc

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "hash",
                "usage": "hash path_to_file",
                "description": "Print the SHA-256 digest of a file.",
            }
        ]

    def dispatch(self, name: str, args: Sequence[str], session: SessionState) -> None:
        if name == "hash":
            self._expect_args(
                args,
                1,
                "Invalid input. 'hash' command requires a single parameter (path_to_file)",
            )
            digest = self._hash_file_uc.execute(self._resolve(args[0], session.cwd()))
            self._say(f"Hash (SHA-256): {digest}")
            return

        raise self._unknown(name)
