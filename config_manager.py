"""Configuration management for the queen board CLI.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize board, animation and export settings, plus an optional set of
queens to place before verifying and simulating.

File format (high-level)
------------------------
- board_settings: board size and per-step animation delay (seconds).
- output_settings: output directory, export toggles and an optional run tag.
- initial_queens: list of ``[row, col]`` squares placed at start-up.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist the queen board configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_board_settings(self):
        """Return board settings (size, step delay)."""
        return self.config.get("board_settings", {})

    def get_output_settings(self):
        """Return export settings (output dir, trace/plot toggles, run tag)."""
        return self.config.get("output_settings", {})

    def get_initial_queens(self):
        """Return the start-up squares as a list of ``(row, col)`` tuples."""
        return [tuple(square) for square in self.config.get("initial_queens", [])]

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
