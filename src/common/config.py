"""Config file lookup, required env vars and the lazily-loaded config holder.

The API reads `configs/<name>.yaml`; the migration job reads only the
environment. Both raise ConfigurationError when something required is missing.
"""

import os
from pathlib import Path
from typing import TypeVar, Callable, Generic

import yaml

from common.errors import ConfigurationError

T = TypeVar('T')

CONFIG_DIR = Path(__file__).resolve().parents[2] / "configs"


def find_config_path(
    config_name: str | None,
    config_dir: Path = CONFIG_DIR,
    default_name: str = "prod",
    env_var: str | None = None,
) -> Path:
    """Resolve `configs/<name>.yaml`.

    An explicit name wins, then `env_var` (NEWS_API_CONFIG for the API), then
    `default_name`.

    Raises:
        ConfigurationError: If the resolved file is missing
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    config_path = config_dir / f"{config_name}.yaml"
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load a YAML config; an empty file yields {}."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def require_env(name: str) -> str:
    """Return a required environment variable or raise ConfigurationError."""
    value = os.environ.get(name)
    if not value:
        raise ConfigurationError(
            f"Missing {name} environment variable. Please add it to your .env file"
        )
    return value


class ConfigSingleton(Generic[T]):
    """Process-wide holder for the API config.

    news_api.config wires `get_config`, `set_config` and `reset_config` to
    one instance; `create_app` and `main` read it when no config is passed.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        """Return the config, loading it on first use."""
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        """Replace the config without loading."""
        self._config = config

    def reset(self) -> None:
        """Drop the config so the next get() reloads it."""
        self._config = None
