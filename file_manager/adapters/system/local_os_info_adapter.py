"""
Local host implementation of the OS info port.
"""

import getpass
import logging
import os
import platform
import sys

import psutil
from typing_extensions import override

from file_manager.ports.system.os_info_port import CpuInfo, OsInfoPort

UNKNOWN_MODEL = "Unknown CPU"


class LocalOsInfoAdapter(OsInfoPort):
    """Reads host facts via the standard library and psutil."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def eol(self) -> str:
        return os.linesep

    def _cpu_models(self) -> list[str]:
        """Per-CPU model names, from /proc/cpuinfo on Linux."""
        if sys.platform.startswith("linux"):
            try:
                with open("/proc/cpuinfo", "r", encoding="utf-8") as f:
                    return [
                        line.split(":", 1)[1].strip()
                        for line in f
                        if line.lower().startswith("model name")
                    ]
            except OSError as e:
                self._logger.warning(f"Could not read /proc/cpuinfo: {e}")
        model = platform.processor()
        return [model] if model else []

    def _cpu_speeds(self) -> list[float]:
        try:
            freqs = psutil.cpu_freq(percpu=True) or []
        except (AttributeError, NotImplementedError, OSError) as e:
            # cpu_freq is missing on some platforms
            self._logger.warning(f"CPU frequency unavailable: {e}")
            return []
        return [float(f.current) for f in freqs]

    @override
    def cpus(self) -> list[CpuInfo]:
        count = psutil.cpu_count(logical=True) or os.cpu_count() or 1
        models = self._cpu_models()
        speeds = self._cpu_speeds()
        cpus: list[CpuInfo] = []
        for i in range(count):
            # Fewer entries than CPUs means one shared value (e.g. macOS, Windows)
            model = models[i] if i < len(models) else (models[0] if models else UNKNOWN_MODEL)
            speed = speeds[i] if i < len(speeds) else (speeds[0] if speeds else 0.0)
            cpus.append({"model": model, "speed_mhz": speed})
        return cpus

    @override
    def homedir(self) -> str:
        return os.path.expanduser("~")

    @override
    def username(self) -> str:
        return getpass.getuser()

    @override
    def architecture(self) -> str:
        return platform.machine()
