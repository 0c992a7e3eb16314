"""
Commands ``cat``, ``add``, ``mkdir``, ``rn``, ``cp``, ``mv`` and ``rm`` mapped to the Files use cases.
"""

import logging
import os
from types import ModuleType
from typing import Optional, Sequence

from rich.console import Console

from file_manager.entities.session import SessionState
from file_manager.ports.commands.commands_port import CommandSpec
from file_manager.use_cases.commands.base import BaseCommandsHandler
from file_manager.use_cases.files.create_entries import (
    CreateFileUseCase,
    MakeDirectoryUseCase,
)
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.remove_file import RemoveFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.files.transfer_file import CopyFileUseCase, MoveFileUseCase
from file_manager.utils.streams import decode_chunks


class FilesCommandsHandler(BaseCommandsHandler):
    """Handler for commands that read, create, rename, copy, move or delete files."""

    def __init__(
        self,
        read_file_uc: ReadFileUseCase,
        create_file_uc: CreateFileUseCase,
        make_directory_uc: MakeDirectoryUseCase,
        rename_file_uc: RenameFileUseCase,
        copy_file_uc: CopyFileUseCase,
        move_file_uc: MoveFileUseCase,
        remove_file_uc: RemoveFileUseCase,
        console: Console,
        logger: Optional[logging.Logger] = None,
        pathmod: ModuleType = os.path,
    ):
        """
        Initialize the files commands handler.

        Args:
            read_file_uc: Use case for ``cat``
            create_file_uc: Use case for ``add``
            make_directory_uc: Use case for ``mkdir``
            rename_file_uc: Use case for ``rn``
            copy_file_uc: Use case for ``cp``
            move_file_uc: Use case for ``mv``
            remove_file_uc: Use case for ``rm``
            console: Console receiving command output
            logger: Logger instance to use for logging
            pathmod: Path flavour used to resolve user input
        """
        super().__init__(console, logger, pathmod)
        self._read_file_uc = read_file_uc
        self._create_file_uc = create_file_uc
        self._make_directory_uc = make_directory_uc
        self._rename_file_uc = rename_file_uc
        self._copy_file_uc = copy_file_uc
        self._move_file_uc = move_file_uc
        self._remove_file_uc = remove_file_uc

    def available_commands(self) -> list[CommandSpec]:
        return [
            {
                "name": "cat",
                "usage": "cat path_to_file",
                "description": "Print a file's contents.",
            },
            {
                "name": "add",
                "usage": "add new_file_name",
                "description": "Create an empty file in the current directory.",
            },
            {
                "name": "mkdir",
                "usage": "mkdir new_directory_name",
                "description": "Create a directory in the current directory.",
            },
            {
                "name": "rn",
                "usage": "rn path_to_file new_filename",
                "description": "Rename a file; a bare name renames it in place.",
            },
            {
                "name": "cp",
                "usage": "cp path_to_file path_to_new_directory",
                "description": "Copy a file into a directory.",
            },
            {
                "name": "mv",
                "usage": "mv path_to_file path_to_new_directory",
                "description": "Move a file into a directory (copy, then delete).",
            },
            {
                "name": "rm",
                "usage": "rm path_to_file",
                "description": "Delete a file.",
            },
        ]

    def dispatch(self, name: str, args: Sequence[str], session: SessionState) -> None:
        cwd = session.cwd()

        if name == "cat":
            self._expect_args(
                args,
                1,
                "Invalid input: 'cat' command expects exactly one argument (file path)",
            )
            chunks = self._read_file_uc.execute(self._resolve(args[0], cwd))
            # Written raw: rich rendering expands tabs and strips \r
            stream = self._console.file
            decode_chunks(chunks, stream.write)
            stream.flush()
            self._console.out("")
            return

        if name == "add":
            self._expect_args(
                args,
                1,
                "Invalid input: 'add' command expects exactly one argument (new file name)",
            )
            path = self._create_file_uc.execute(self._resolve(args[0], cwd))
            self._say(f"File '{path}' created successfully.")
            return

        if name == "mkdir":
            self._expect_args(
                args,
                1,
                "Invalid input: 'mkdir' command expects exactly one argument (new directory name)",
            )
            path = self._make_directory_uc.execute(self._resolve(args[0], cwd))
            self._say(f"Directory '{path}' created successfully.")
            return

        if name == "rn":
            self._expect_args(
                args,
                2,
                "Invalid input: 'rn' command expects exactly two arguments (path_to_file new_filename)",
            )
            source = self._resolve(args[0], cwd)
            # New name is relative to the file's own directory, not the cwd
            destination = self._resolve(args[1], self._pathmod.dirname(source))
            self._rename_file_uc.execute(source, destination)
            self._say(f"File '{source}' successfully renamed to '{destination}'")
            return

        if name == "cp":
            self._expect_args(
                args,
                2,
                "Invalid input: 'cp' command expects exactly two arguments (path_to_file path_to_new_directory)",
            )
            source = self._resolve(args[0], cwd)
            destination = self._copy_file_uc.execute(
                source, self._resolve(args[1], cwd)
            )
            self._say(f"File '{source}' successfully copied to '{destination}'")
            return

        if name == "mv":
            self._expect_args(
                args,
                2,
                "Both source file and destination directory are required",
                at_least=True,
            )
            source = self._resolve(args[0], cwd)
            destination = self._move_file_uc.execute(
                source, self._resolve(args[1], cwd)
            )
            self._say(f"File '{source}' successfully moved to '{destination}'")
            return

        if name == "rm":
            self._expect_args(args, 1, "File path required", at_least=True)
            path = self._remove_file_uc.execute(self._resolve(args[0], cwd))
            self._say(f"File '{path}' removed successfully.")
            return

        raise self._unknown(name)
