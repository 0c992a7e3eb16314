"""
Port for host operating system facts.
"""

from abc import ABC, abstractmethod
from typing import TypedDict


class CpuInfo(TypedDict):
    """One logical CPU."""

    model: str
    speed_mhz: float


class OsInfoPort(ABC):
    """Port interface for querying the host system."""

    @abstractmethod
    def eol(self) -> str:
        """Return the platform end-of-line sequence."""
        pass

    @abstractmethod
    def cpus(self) -> list[CpuInfo]:
        """Return one entry per logical CPU."""
        pass

    @abstractmethod
    def homedir(self) -> str:
        """Return the current user's home directory."""
        pass

    @abstractmethod
    def username(self) -> str:
        """Return the login name of the current system user."""
        pass

    @abstractmethod
    def architecture(self) -> str:
        """Return the CPU architecture name."""
        pass
