"""
Session state: the current working directory of an interactive session.
"""

import os
from typing import Optional

from file_manager.exceptions import ConfigurationError


class SessionState:
    """Mutable current-directory holder owned by the session loop."""

    def __init__(self, current_dir: str):
        self._current_dir = self._validate(current_dir)

    @staticmethod
    def _validate(path: str) -> str:
        if not path or not isinstance(path, str):
            raise ConfigurationError("Current directory must be a non-empty string")
        if not os.path.isabs(path):
            raise ConfigurationError(f"Current directory must be absolute: {path}")
        return path

    def cwd(self, new_dir: Optional[str] = None) -> str:
        """
        Get the current directory, or set it when ``new_dir`` is given.

        Args:
            new_dir: New absolute directory to switch to

        Returns:
            The current directory after the call
        """
        if new_dir:
            self._current_dir = self._validate(new_dir)
        return self._current_dir

    def __repr__(self) -> str:
        return f"SessionState(current_dir='{self._current_dir}')"
