"""
Commands ``compress`` and ``decompress`` mapped to the archive use cases.
"""

import logging
import os
from types import ModuleType
from typing import Optional, Sequence

from rich.console import Console

from file_manager.entities.session import SessionState
from file_manager.ports.commands.commands_port import CommandSpec
from file_manager.use_cases.archive.compress_file import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.commands.base import BaseCommandsHandler


class ArchiveCommandsHandler(BaseCommandsHandler):
    """Handler for Brotli compression commands."""

    def __init__(
        self,
        compress_uc: CompressFileUseCase,
        decompress_uc: DecompressFileUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
        pathmod: ModuleType = os.path,
    ):
        super().__init__(console, logger, pathmod)
        self._compress_uc = compress_uc
        self._decompress_uc = decompress_uc

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "compress",
                "usage": "compress path_to_file path_to_destination",
                "description": "Brotli-compress a file into a new file.",
            },
            {
                "name": "decompress",
                "usage": "decompress path_to_file path_to_destination",
                "description": "Decompress a Brotli file into a new file.",
            },
        ]

    def dispatch(self, name: str, args: Sequence[str], session: SessionState) -> None:
        if name not in ("compress", "decompress"):
            raise self._unknown(name)

        self._expect_args(
            args,
            2,
            f"Invalid input. '{name}' command requires two parameters: (path_to_file path_to_destination)",
        )
        cwd = session.cwd()
        source = self._resolve(args[0], cwd)
        destination = self._resolve(args[1], cwd)

        if name == "compress":
            self._compress_uc.execute(source, destination)
            self._say(f"File compressed successfully to {destination}")
        else:
            self._decompress_uc.execute(source, destination)
            self._say(f"File decompressed successfully to {destination}")
