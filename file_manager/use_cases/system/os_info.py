"""
Use case for reporting host operating system facts.
"""

import json
import logging
from typing import Callable, Optional

from file_manager.exceptions import UsageError
from file_manager.ports.system.os_info_port import OsInfoPort

OS_PARAMETERS = ("--EOL", "--cpus", "--homedir", "--username", "--architecture")


class OsInfoUseCase:
    """Use case for the ``os`` command: one parameter, one report."""

    def __init__(
        self,
        os_info: OsInfoPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            os_info: Adapter reading host facts
            logger: Logger instance to use for logging
        """
        self._os_info = os_info
        self._logger = logger or logging.getLogger(__name__)
        self._reports: dict[str, Callable[[], list[str]]] = {
            "--EOL": self._eol,
            "--cpus": self._cpus,
            "--homedir": self._homedir,
            "--username": self._username,
            "--architecture": self._architecture,
        }

    def execute(self, parameter: str) -> list[str]:
        """
        Build the report lines for one parameter.

        Args:
            parameter: One of ``OS_PARAMETERS``

        Returns:
            Lines to print

        Raises:
            UsageError: If the parameter is not supported
        """
        report = self._reports.get(parameter)
        if report is None:
            raise UsageError(
                "Invalid 'os' parameter. Use --EOL, --cpus, --homedir, --username, or --architecture"
            )
        self._logger.info(f"Reporting OS info: {parameter}")
        return report()

    def _eol(self) -> list[str]:
        return [f"System EOL: {json.dumps(self._os_info.eol())}"]

    def _cpus(self) -> list[str]:
        cpus = self._os_info.cpus()
        lines = [f"Total CPUs: {len(cpus)}", "CPU Details:"]
        for index, cpu in enumerate(cpus, start=1):
            ghz = round(cpu["speed_mhz"] / 1000, 2)
            lines.append(f"CPU {index}: {cpu['model']} ({ghz} GHz)")
        return lines

    def _homedir(self) -> list[str]:
        return [f"Home Directory: {self._os_info.homedir()}"]

    def _username(self) -> list[str]:
        return [f"System Username: {self._os_info.username()}"]

    def _architecture(self) -> list[str]:
        return [f"CPU Architecture: {self._os_info.architecture()}"]
