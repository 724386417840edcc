"""
Dungeon Robot configuration

Loads settings from environment variables (and a .env file, if present)
with defaults matching the classic game.
"""

import logging
import os

from dotenv import load_dotenv

from .constants import STARTING_ENERGY
from .levels import DEFAULT_LEVEL

# Load .env file if it exists
load_dotenv()


class Config:
    """Settings for one game session.

    Values are kept as read and only checked by validate(), so a bad
    environment variable is reported instead of failing on import.
    """

    def __init__(self, starting_energy=STARTING_ENERGY, level=DEFAULT_LEVEL,
                 level_file=None, log_file="dungeon_robot.log", log_level="INFO"):
        self.starting_energy = starting_energy
        # Level selection: a file wins over a built-in level name
        self.level      = level
        self.level_file = level_file
        # Logging goes to a file because curses owns the terminal; "" disables it
        self.log_file   = log_file
        self.log_level  = log_level.upper()

    @classmethod
    def from_env(cls) -> "Config":
        """Build a Config from ROBOT_* environment variables."""
        return cls(
            starting_energy=os.getenv("ROBOT_STARTING_ENERGY", str(STARTING_ENERGY)),
            level=os.getenv("ROBOT_LEVEL", DEFAULT_LEVEL),
            level_file=os.getenv("ROBOT_LEVEL_FILE") or None,
            log_file=os.getenv("ROBOT_LOG_FILE", "dungeon_robot.log"),
            log_level=os.getenv("ROBOT_LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        """Normalise values and raise ValueError if any setting is unusable."""
        try:
            self.starting_energy = int(self.starting_energy)
        except (TypeError, ValueError):
            raise ValueError(
                f"ROBOT_STARTING_ENERGY must be an integer, got {self.starting_energy!r}"
            ) from None
        if self.starting_energy <= 0:
            raise ValueError(
                f"ROBOT_STARTING_ENERGY must be positive, got {self.starting_energy}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"ROBOT_LOG_LEVEL {self.log_level!r} is not a logging level")

    def display(self) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Dungeon Robot Configuration:",
            f"  Starting Energy: {self.starting_energy}",
            f"  Level: {self.level_file or self.level}",
            f"  Log File: {self.log_file or '(disabled)'}",
            f"  Log Level: {self.log_level}",
        ]
        return "\n".join(lines)
