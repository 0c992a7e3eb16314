"""
Tests for the LocalOsInfoAdapter.
"""

import os
from collections import namedtuple
from unittest.mock import patch

from file_manager.adapters.system.local_os_info_adapter import (
    UNKNOWN_MODEL,
    LocalOsInfoAdapter,
)

Freq = namedtuple("Freq", "current min max")


def test_simple_facts(mock_logger):
    """Test simple facts."""
    adapter = LocalOsInfoAdapter(mock_logger)
    assert adapter.eol() == os.linesep
    assert adapter.homedir() == os.path.expanduser("~")
    assert adapter.username()
    assert isinstance(adapter.architecture(), str)


def test_cpus_one_entry_per_logical_cpu(mock_logger):
    """Test cpus one entry per logical cpu."""
    adapter = LocalOsInfoAdapter(mock_logger)
    with patch(
        "file_manager.adapters.system.local_os_info_adapter.psutil.cpu_count",
        return_value=2,
    ), patch(
        "file_manager.adapters.system.local_os_info_adapter.psutil.cpu_freq",
        return_value=[Freq(2400.0, 800.0, 3000.0)],
    ), patch.object(adapter, "_cpu_models", return_value=["Test CPU"]):
        cpus = adapter.cpus()

    assert cpus == [
        {"model": "Test CPU", "speed_mhz": 2400.0},
        {"model": "Test CPU", "speed_mhz": 2400.0},
    ]


def test_cpus_without_frequency_support(mock_logger):
    """Test cpus without frequency support."""
    adapter = LocalOsInfoAdapter(mock_logger)
    with patch(
        "file_manager.adapters.system.local_os_info_adapter.psutil.cpu_count",
        return_value=1,
    ), patch(
        "file_manager.adapters.system.local_os_info_adapter.psutil.cpu_freq",
        side_effect=NotImplementedError("no cpufreq"),
    ), patch.object(adapter, "_cpu_models", return_value=[]):
        cpus = adapter.cpus()

    assert cpus == [{"model": UNKNOWN_MODEL, "speed_mhz": 0.0}]
    mock_logger.warning.assert_called_once()
