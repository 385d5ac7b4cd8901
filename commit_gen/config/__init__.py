"""Configuration Management Package

Looks for a JSON .commitgenrc in the current directory, then the home
directory, then falls back to built-in defaults.
"""

import json
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from commit_gen import COMMIT_TYPE_NAMES
from commit_gen.analysis.labels import LANGUAGES

# Valid configuration values
VALID_PROVIDERS = {"auto", "claude", "ollama", "command"}
VALID_LANGUAGES = set(LANGUAGES)


@dataclass
class Config:
    """User configuration with sensible defaults."""
    provider: str = "auto"
    model: Optional[str] = None
    command: str = "claude -p"  # argv for the 'command' provider
    commit_type: str = "feat"
    language: str = "pt"

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if self.provider not in VALID_PROVIDERS:
            warnings.append(f"Invalid provider '{self.provider}', using '{defaults.provider}'")
            self.provider = defaults.provider

        if self.commit_type not in COMMIT_TYPE_NAMES:
            warnings.append(f"Invalid commit_type '{self.commit_type}', using '{defaults.commit_type}'")
            self.commit_type = defaults.commit_type

        if self.language not in VALID_LANGUAGES:
            warnings.append(f"Invalid language '{self.language}', using '{defaults.language}'")
            self.language = defaults.language

        if not isinstance(self.command, str) or not self.command.strip():
            warnings.append(f"Invalid command '{self.command}', using '{defaults.command}'")
            self.command = defaults.command

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_FILENAME = ".commitgenrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
    "VALID_PROVIDERS",
    "VALID_LANGUAGES",
]
