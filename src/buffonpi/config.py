"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths, global constants
and the settings of a simulation run.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets when the app is frozen into an .exe.
3. Defaults: The playground size, number of lines and number of toothpicks
   live in one JSON file instead of in the code that uses them.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_SETTINGS_PATH (str): Absolute path to the default settings file.
    ToothpickSettings: Settings of one run.
    load_settings: Read settings from a JSON file.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

from buffonpi.exceptions import InvalidConfiguration
from buffonpi.model.field import Field

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/buffonpi/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_SETTINGS_PATH: str = os.path.join(ASSETS_PATH, "settings_default.json")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class ToothpickSettings:
    """Setup input of a run. Sizes are in pixels, the interval in milliseconds."""
    toothpick_length: float = 100.0
    lines_count: int = 10
    max_playground_width: float = 1400.0
    playground_height: float = 600.0
    toothpick_count: int = 2000
    throw_interval: float = 1.0
    seed: Optional[int] = None

    def validate(self) -> None:
        for name in ("toothpick_length", "max_playground_width", "playground_height", "throw_interval"):
            value = getattr(self, name)
            if not is_number(value):
                raise InvalidConfiguration(f"Setting '{name}' must be a number, got {value!r}.")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0):
            raise InvalidConfiguration(f"Seed must be a non-negative integer or null, got {self.seed!r}.")
        if self.toothpick_length <= 0:
            raise InvalidConfiguration(f"Toothpick length must be positive, got {self.toothpick_length}.")
        if isinstance(self.lines_count, bool) or not isinstance(self.lines_count, int) or self.lines_count < 2:
            raise InvalidConfiguration(f"At least 2 lines are required, got {self.lines_count!r}.")
        if self.max_playground_width <= 0:
            raise InvalidConfiguration(f"Playground width must be positive, got {self.max_playground_width}.")
        if self.playground_height <= 0:
            raise InvalidConfiguration(f"Playground height must be positive, got {self.playground_height}.")
        if isinstance(self.toothpick_count, bool) or not isinstance(self.toothpick_count, int) \
                or self.toothpick_count <= 0:
            raise InvalidConfiguration(f"Toothpick count must be a positive integer, got {self.toothpick_count!r}.")
        if self.throw_interval < 0:
            raise InvalidConfiguration(f"Throw interval must not be negative, got {self.throw_interval}.")

    def build_field(self) -> Field:
        return Field.create(
            requested_length=self.toothpick_length,
            line_count=self.lines_count,
            max_total_width=self.max_playground_width,
            extent_height=self.playground_height,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ToothpickSettings:
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown setting '{key}'.")
        settings = cls(**{k: v for k, v in data.items() if k in known})
        settings.validate()
        return settings


def load_settings(path: Optional[str] = None) -> ToothpickSettings:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file. Defaults to ``DEFAULT_SETTINGS_PATH``.

    Returns:
        Validated settings. Built-in defaults are used if the file does not exist.

    Raises:
        InvalidConfiguration: If the file is not valid JSON or holds invalid values.
    """
    path = path or DEFAULT_SETTINGS_PATH
    if not os.path.exists(path):
        logger.warning(f"Settings file not found at {path}, using defaults.")
        settings = ToothpickSettings()
        settings.validate()
        return settings

    logger.info(f"Loading settings from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfiguration(f"Settings file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Settings file {path} must contain a JSON object.")
    return ToothpickSettings.from_dict(data)
