"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional

from rich.console import Console

from file_manager.adapters.files.brotli_adapter import BrotliCompressionAdapter
from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.adapters.system.local_os_info_adapter import LocalOsInfoAdapter
from file_manager.config.settings import Settings
from file_manager.ports.commands.commands_port import CommandsHandlerPort
from file_manager.ports.files.compression_port import CompressionPort
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.ports.system.os_info_port import OsInfoPort
from file_manager.use_cases.archive.compress_file import (
    CompressFileUseCase,
    DecompressFileUseCase,
)
from file_manager.use_cases.commands.archive_commands import ArchiveCommandsHandler
from file_manager.use_cases.commands.files_commands import FilesCommandsHandler
from file_manager.use_cases.commands.hash_commands import HashCommandsHandler
from file_manager.use_cases.commands.navigation_commands import (
    NavigationCommandsHandler,
)
from file_manager.use_cases.commands.registry import CommandRegistry
from file_manager.use_cases.commands.system_commands import SystemCommandsHandler
from file_manager.use_cases.files.create_entries import (
    CreateFileUseCase,
    MakeDirectoryUseCase,
)
from file_manager.use_cases.files.hash_file import HashFileUseCase
from file_manager.use_cases.files.read_file import ReadFileUseCase
from file_manager.use_cases.files.remove_file import RemoveFileUseCase
from file_manager.use_cases.files.rename_file import RenameFileUseCase
from file_manager.use_cases.files.transfer_file import CopyFileUseCase, MoveFileUseCase
from file_manager.use_cases.navigation.change_directory import (
    ChangeDirectoryUseCase,
    GoUpUseCase,
)
from file_manager.use_cases.navigation.list_directory import ListDirectoryUseCase
from file_manager.use_cases.system.os_info import OsInfoUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self._settings = settings
        self._console = console
        self._error_console = error_console
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_console(self) -> Console:
        """Console for regular command output (stdout)."""
        if self._console is None:
            self._console = Console(highlight=False, soft_wrap=True)
        return self._console

    def get_error_console(self) -> Console:
        """Console for error reports (stderr)."""
        if self._error_console is None:
            self._error_console = Console(stderr=True, highlight=False, soft_wrap=True)
        return self._error_console

    def _get(self, key: str, factory):  # type: ignore[no-untyped-def]
        if key not in self._instances:
            self._instances[key] = factory()
        return self._instances[key]

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        return self._get(
            "file_repository",
            lambda: LocalFileSystemAdapter(
                self._logger, chunk_size=self.get_settings().chunk_size
            ),
        )

    def get_compression_adapter(self) -> CompressionPort:
        """
        Get compression adapter instance.

        Returns:
            CompressionPort implementation
        """
        return self._get(
            "compression_adapter",
            lambda: BrotliCompressionAdapter(
                self._logger,
                chunk_size=self.get_settings().chunk_size,
                quality=self.get_settings().brotli_quality,
            ),
        )

    def get_os_info_adapter(self) -> OsInfoPort:
        return self._get("os_info_adapter", lambda: LocalOsInfoAdapter(self._logger))

    def get_navigation_commands_handler(self) -> CommandsHandlerPort:
        """
        Commands 'up', 'cd', 'ls' backed by the navigation use cases.
        """

        def build() -> NavigationCommandsHandler:
            repo = self.get_file_repository()
            return NavigationCommandsHandler(
                GoUpUseCase(self._logger),
                ChangeDirectoryUseCase(repo, self._logger),
                ListDirectoryUseCase(repo, self._logger),
                self.get_console(),
                self._logger,
            )

        return self._get("navigation_commands_handler", build)

    def get_files_commands_handler(self) -> CommandsHandlerPort:
        """
        Commands 'cat', 'add', 'mkdir', 'rn', 'cp', 'mv', 'rm' backed by the Files use cases.
        """

        def build() -> FilesCommandsHandler:
            repo = self.get_file_repository()
            return FilesCommandsHandler(
                ReadFileUseCase(repo, self._logger),
                CreateFileUseCase(repo, self._logger),
                MakeDirectoryUseCase(repo, self._logger),
                RenameFileUseCase(repo, self._logger),
                CopyFileUseCase(repo, self._logger),
                MoveFileUseCase(repo, self._logger),
                RemoveFileUseCase(repo, self._logger),
                self.get_console(),
                self._logger,
            )

        return self._get("files_commands_handler", build)

    def get_hash_commands_handler(self) -> CommandsHandlerPort:
        return self._get(
            "hash_commands_handler",
            lambda: HashCommandsHandler(
                HashFileUseCase(self.get_file_repository(), self._logger),
                self.get_console(),
                self._logger,
            ),
        )

    def get_archive_commands_handler(self) -> CommandsHandlerPort:
        def build() -> ArchiveCommandsHandler:
            repo = self.get_file_repository()
            compression = self.get_compression_adapter()
            return ArchiveCommandsHandler(
                CompressFileUseCase(repo, compression, self._logger),
                DecompressFileUseCase(repo, compression, self._logger),
                self.get_console(),
                self._logger,
            )

        return self._get("archive_commands_handler", build)

    def get_system_commands_handler(self) -> CommandsHandlerPort:
        # 'help' lists the registry, which is built after this handler
        return self._get(
            "system_commands_handler",
            lambda: SystemCommandsHandler(
                OsInfoUseCase(self.get_os_info_adapter(), self._logger),
                lambda: self.get_command_registry().available_commands(),
                self.get_console(),
                self._logger,
            ),
        )

    def get_command_registry(self) -> CommandRegistry:
        """
        Get the closed command registry with every handler wired in.

        Returns:
            CommandRegistry instance
        """
        return self._get(
            "command_registry",
            lambda: CommandRegistry(
                [
                    self.get_navigation_commands_handler(),
                    self.get_files_commands_handler(),
                    self.get_hash_commands_handler(),
                    self.get_archive_commands_handler(),
                    self.get_system_commands_handler(),
                ]
            ),
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
