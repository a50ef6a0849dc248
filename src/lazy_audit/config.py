"""Configuration management for lazy-audit settings."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from lazy_audit.actions.errors import ConfigError

FORMATS = ("plain", "rich", "json")


@dataclass
class Settings:
    """Defaults for the audit command; CLI flags take precedence."""

    dry_run: bool = False
    format: str = "plain"
    verbose: bool = False


class ConfigManager:
    """Loads settings from ``settings.yaml`` in the config directory.

    Read-only: a missing file means defaults, nothing is ever written.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        if config_dir is None:
            # Check for environment variable override
            env_config = os.getenv("LAZY_AUDIT_CONFIG")
            if env_config:
                config_dir = Path(env_config).expanduser().resolve()
            else:
                # Default to ~/.lazy-audit
                config_dir = Path.home() / ".lazy-audit"

        self.config_dir = config_dir
        self.settings_file = config_dir / "settings.yaml"

    def _load_raw(self) -> dict[str, Any]:
        """Load the raw mapping from the YAML file."""
        if not self.settings_file.exists():
            return {}

        try:
            with open(self.settings_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.settings_file}: {e}") from e
        except (UnicodeDecodeError, OSError) as e:
            raise ConfigError(f"Cannot read {self.settings_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.settings_file} must contain a mapping")
        return data

    def load(self) -> Settings:
        """Return validated settings, falling back to defaults."""
        raw = self._load_raw()
        known = {f.name for f in fields(Settings)}
        unknown = sorted(str(key) for key in raw if key not in known)
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(unknown)}")

        settings = Settings(**raw)
        for flag in ("dry_run", "verbose"):
            if not isinstance(getattr(settings, flag), bool):
                raise ConfigError(f"Setting '{flag}' must be true or false")
        if settings.format not in FORMATS:
            raise ConfigError(f"Setting 'format' must be one of: {', '.join(FORMATS)}")
        return settings
