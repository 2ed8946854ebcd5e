import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from typing_extensions import Self

from sampurnan.domain.manuscript.model.catalog import DEFAULT_PAGE_SIZE, SortKey


def data_dir() -> Path:
    """Data directory: SAMPURNAN_DATA_DIR, else ~/.local/share/sampurnan."""
    override = os.environ.get("SAMPURNAN_DATA_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".local" / "share" / "sampurnan"


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by SAMPURNAN_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        yaml_data = self._load_yaml_config()
        return yaml_data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        config_file = os.environ.get("SAMPURNAN_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class Server(BaseModel):
    name: str = "Sampurnan"
    version: str = "0.1.0"
    description: str = "Digital gallery and back office for a manuscript collection"


class DatabaseConfig(BaseModel):
    """Database configuration.

    An empty url means "SQLite file under the data directory"; the actual URL
    is filled in by Config's model_validator.
    """

    url: str = ""
    echo: bool = False
    auto_migrate: bool = True


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from SAMPURNAN_LOG_FILE env var."""
        return os.environ.get("SAMPURNAN_LOG_FILE")


class AdminConfig(BaseModel):
    """Admin session configuration. An empty token disables the admin surface."""

    token: str = ""


class CatalogConfig(BaseModel):
    page_size: int = DEFAULT_PAGE_SIZE
    sort_key: SortKey = SortKey.TITLE
    highlight_manuscripts: int = 4
    highlight_articles: int = 3
    highlight_entries: int = 2


class StoryConfig(BaseModel):
    """Generative story configuration. Without an api_key the feature is disabled."""

    api_key: str = ""
    model: str = "gemini-2.5-flash"
    temperature: float = 0.8
    top_p: float = 0.95


class DriveConfig(BaseModel):
    api_key: str = ""
    base_url: str = "https://www.googleapis.com/drive/v3"


class CorsConfig(BaseModel):
    """App-wide CORS middleware origins. Empty leaves the middleware off.

    The folder-listing proxy answers with its own permissive headers either way.
    """

    allowed_origins: list[str] = []


class Config(BaseSettings):
    server: Server = Server()
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    admin: AdminConfig = AdminConfig()
    catalog: CatalogConfig = CatalogConfig()
    story: StoryConfig = StoryConfig()
    drive: DriveConfig = DriveConfig()
    cors: CorsConfig = CorsConfig()

    model_config = {
        "env_prefix": "SAMPURNAN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # SAMPURNAN_DATABASE__URL, SAMPURNAN_STORY__API_KEY, ...
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def derive_database_url(self) -> Self:
        if not self.database.url:
            self.database = DatabaseConfig(
                url=f"sqlite+aiosqlite:///{data_dir() / 'sampurnan.db'}",
                echo=self.database.echo,
                auto_migrate=self.database.auto_migrate,
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: init values, environment, .env file, YAML file, secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging once, before the app is built."""
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for noisy in ("httpx", "httpcore", "asyncio", "aiosqlite", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
