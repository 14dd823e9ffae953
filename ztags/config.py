"""Configuration and environment variables."""

import os
import yaml
from dataclasses import dataclass, fields
from pathlib import Path

# Global config directory
CONFIG_DIR = Path.home() / ".ztags"
CONFIG_FILE = CONFIG_DIR / "config.yaml"
LOCAL_CONFIG_NAME = ".ztags.yaml"


@dataclass
class Config:
    """Runtime settings for a single ztags run."""

    output: str = "-"
    debug: bool = False
    log_dir: str = ""

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file and environment variables.

        Config priority (later overrides earlier):
        1. ~/.ztags/config.yaml (global)
        2. .ztags.yaml (local project)
        3. Environment variables
        """
        config_data = {}

        config_paths = [
            str(CONFIG_FILE),
            os.path.join(os.getcwd(), LOCAL_CONFIG_NAME),
        ]

        for path in config_paths:
            if os.path.exists(path):
                try:
                    with open(path, "r") as f:
                        file_data = yaml.safe_load(f) or {}
                    if isinstance(file_data, dict):
                        config_data.update(file_data)
                except (OSError, yaml.YAMLError):
                    pass  # Unreadable config files are ignored

        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in config_data.items() if k in known})
        config.debug = _as_bool(config.debug)

        env_output = os.getenv("ZTAGS_OUTPUT", "")
        if env_output:
            config.output = env_output

        if os.getenv("ZTAGS_DEBUG"):
            config.debug = _as_bool(os.getenv("ZTAGS_DEBUG", ""))

        env_log_dir = os.getenv("ZTAGS_LOG_DIR", "")
        if env_log_dir:
            config.log_dir = env_log_dir

        return config

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not self.output:
            errors.append("Output path is empty; use '-' for standard output")
        elif self.output != "-" and Path(self.output).is_dir():
            errors.append(f"Output path '{self.output}' is a directory")
        return errors


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)
