"""Configuration loader for news-api."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from common.config import ConfigSingleton, find_config_path, load_yaml, require_env
from common.errors import ConfigurationError

load_dotenv()

DEFAULT_ORIGINS = [
    "https://legalnest.live",
    "https://www.legalnest.live",
    "http://localhost:5173",
]
DEFAULT_ORIGIN_REGEX = (
    r"^(https://law.*\.vercel\.app"
    r"|http://192\.168\.\d+\.\d+:\d+"
    r"|http://10\.\d+\.\d+\.\d+:\d+"
    r"|http://172\.\d+\.\d+\.\d+:\d+)$"
)


@dataclass
class LocalConfig:
    articles_path: str = "tests/data/articles.jsonl"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 5000


@dataclass
class CorsConfig:
    origins: list[str] = field(default_factory=lambda: list(DEFAULT_ORIGINS))
    origin_regex: str | None = DEFAULT_ORIGIN_REGEX
    max_age: int = 86400


@dataclass
class APIConfig:
    storage: str  # "postgres" or "local"
    database_url: str | None = None
    local: LocalConfig | None = None
    server: ServerConfig = field(default_factory=ServerConfig)
    cors: CorsConfig = field(default_factory=CorsConfig)

    @property
    def is_postgres(self) -> bool:
        return self.storage == "postgres"


def load_config(config_name: str | None = None) -> APIConfig:
    """Load configuration from YAML file plus environment.

    Args:
        config_name: Name of config file (without .yaml extension); falls back
            to NEWS_API_CONFIG, then "prod"

    Returns:
        APIConfig instance

    Raises:
        ConfigurationError: If the config file or DATABASE_URL is missing
    """
    config_path = find_config_path(config_name, env_var="NEWS_API_CONFIG")
    raw = load_yaml(config_path)

    storage = raw.get("storage", "postgres")
    if storage not in ("postgres", "local"):
        raise ConfigurationError(f"Unknown storage backend: {storage}")

    database_url = None
    if storage == "postgres":
        database_url = require_env("DATABASE_URL")

    local_config = None
    if storage == "local":
        local_raw = raw.get("local", {})
        local_config = LocalConfig(
            articles_path=local_raw.get("articles_path", "tests/data/articles.jsonl"),
        )

    server_raw = raw.get("server", {})
    server_config = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=int(os.getenv("PORT", server_raw.get("port", 5000))),
    )

    cors_raw = raw.get("cors", {})
    cors_config = CorsConfig(
        origins=cors_raw.get("origins", list(DEFAULT_ORIGINS)),
        origin_regex=cors_raw.get("origin_regex", DEFAULT_ORIGIN_REGEX),
        max_age=cors_raw.get("max_age", 86400),
    )

    return APIConfig(
        storage=storage,
        database_url=database_url,
        local=local_config,
        server=server_config,
        cors=cors_config,
    )


_manager: ConfigSingleton[APIConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
