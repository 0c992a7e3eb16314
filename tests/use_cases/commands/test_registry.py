"""
Tests for the CommandRegistry.
"""

from unittest.mock import MagicMock

import pytest

from file_manager.ports.commands.commands_port import CommandsHandlerPort
from file_manager.use_cases.commands.registry import CommandRegistry

EXPECTED_COMMANDS = {
    "up",
    "cd",
    "ls",
    "cat",
    "add",
    "mkdir",
    "rn",
    "cp",
    "mv",
    "rm",
    "hash",
    "compress",
    "decompress",
    "os",
    "help",
}


def _handler(*names: str) -> MagicMock:
    handler = MagicMock(spec=CommandsHandlerPort)
    handler.available_commands.return_value = [
        {"name": n, "usage": n, "description": ""} for n in names
    ]
    return handler


def test_container_registry_is_complete(dependency_container):
    """Test container registry is complete."""
    registry = dependency_container.get_command_registry()
    assert set(registry.names()) == EXPECTED_COMMANDS


def test_dispatch_routes_to_owner(session):
    """Test dispatch routes to owner."""
    first, second = _handler("a"), _handler("b")
    registry = CommandRegistry([first, second])

    registry.dispatch("b", ("x",), session)

    second.dispatch.assert_called_once_with("b", ("x",), session)
    first.dispatch.assert_not_called()


def test_unknown_name(session):
    """Test unknown name."""
    registry = CommandRegistry([_handler("a")])
    assert "zzz" not in registry
    with pytest.raises(ValueError, match="No handler found"):
        registry.dispatch("zzz", (), session)


def test_duplicate_names_rejected():
    """Test duplicate names rejected."""
    with pytest.raises(ValueError, match="registered twice"):
        CommandRegistry([_handler("a"), _handler("a")])


def test_table_is_read_only():
    """Test table is read only."""
    registry = CommandRegistry([_handler("a")])
    with pytest.raises(TypeError):
        registry._table["b"] = _handler("b")  # type: ignore[index]
