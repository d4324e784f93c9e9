"""
Configuration management for Game Shelf.
"""
import json
import logging
import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "GAME_SHELF_CONFIG_DIR"
IMAGE_API_KEY_ENV = "GAME_SHELF_IMAGE_API_KEY"


class DirectoryConfig(BaseModel):
    """Directory configuration settings."""
    config: str = Field(default=".config/game-shelf", description="Configuration directory")
    data_dir: Optional[str] = Field(None, description="Override for the data directory")
    storage: str = Field(default="storage", description="Directory for the key-value store")
    exports: str = Field(default="exports", description="Directory for exported collections")
    logs: str = Field(default="logs", description="Directory for application logs")


class StorageConfig(BaseModel):
    """Collection persistence settings."""
    storage_key: str = Field("games", min_length=1, description="Store key holding the collection")
    export_filename: str = Field("games_export.json", description="Default export file name")
    seed_on_first_run: bool = Field(True, description="Load the bundled seed collection on first run")

    @field_validator('export_filename')
    @classmethod
    def validate_export_filename(cls, v):
        """Exports are always JSON files."""
        if not v.lower().endswith('.json'):
            raise ValueError(f"Export file must be a .json file: {v}")
        return v


class ImageSearchConfig(BaseModel):
    """Cover art search settings."""
    enabled: bool = Field(True, description="Offer cover art search in the game form")
    api_key: Optional[str] = Field(None, description="Image search API key")
    engine_id: Optional[str] = Field(None, description="Custom search engine id")
    endpoint: str = Field(
        "https://www.googleapis.com/customsearch/v1",
        description="Image search endpoint"
    )
    max_results: int = Field(10, ge=1, le=10, description="Number of candidate images to fetch")
    timeout: int = Field(10, ge=1, description="HTTP timeout in seconds")

    def resolved_api_key(self) -> Optional[str]:
        """API key from config, falling back to the environment."""
        return self.api_key or os.environ.get(IMAGE_API_KEY_ENV) or None


class UIConfig(BaseModel):
    """User interface configuration."""
    theme: str = Field("dark", description="UI theme name")

    @field_validator('theme')
    @classmethod
    def validate_theme(cls, v):
        if v not in ("dark", "light"):
            raise ValueError(f"Unknown theme: {v}")
        return v


class Config(BaseModel):
    """Main configuration class."""
    directories: DirectoryConfig = Field(default_factory=DirectoryConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    image_search: ImageSearchConfig = Field(default_factory=ImageSearchConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        return Path.home() / self.directories.config

    def get_data_dir(self) -> Path:
        """Get the main data directory path."""
        if self.directories.data_dir:
            return Path(self.directories.data_dir).expanduser()
        return self.get_config_dir()

    def get_storage_dir(self) -> Path:
        """Get the key-value store directory path."""
        return self.get_data_dir() / self.directories.storage

    def get_exports_dir(self) -> Path:
        """Get the exports directory path."""
        return self.get_data_dir() / self.directories.exports

    def get_logs_dir(self) -> Path:
        """Get the logs directory path."""
        return self.get_data_dir() / self.directories.logs

    def get_export_file(self) -> Path:
        """Get the default export file path."""
        return self.get_exports_dir() / self.storage.export_filename

    def get_config_file(self) -> Path:
        """Get the config file path."""
        return self.get_config_dir() / "config.json"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        dirs_to_create = [
            self.get_config_dir(),
            self.get_data_dir(),
            self.get_storage_dir(),
            self.get_exports_dir(),
            self.get_logs_dir()
        ]

        for directory in dirs_to_create:
            directory.mkdir(parents=True, exist_ok=True)


class ConfigManager:
    """Manages loading, saving, and updating configuration."""

    def __init__(self, config_dir: Optional[str] = None):
        self._config: Optional[Config] = None
        self._config_dir = config_dir

    @property
    def config(self) -> Config:
        """Get the current configuration, loading if needed."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def set_config_dir(self, config_dir: Optional[str]) -> None:
        """Point the manager at another config directory and reload lazily."""
        self._config_dir = config_dir
        self._config = None

    def _default_config(self) -> Config:
        config = Config()
        config_dir = self._config_dir or os.environ.get(CONFIG_DIR_ENV)
        if config_dir:
            config.directories.config = str(Path(config_dir).expanduser())
        return config

    def load(self) -> Config:
        """Load configuration from file or create default."""
        config = self._default_config()
        config_file = config.get_config_file()

        if config_file.exists():
            try:
                with open(config_file, 'r') as f:
                    data = json.load(f)
                loaded = Config(**data)
                # The directory we were pointed at wins over the stored one
                loaded.directories.config = config.directories.config
                config = loaded
                logger.info("Loaded configuration from %s", config_file)
            except Exception as e:
                logger.error("Error loading config from %s: %s", config_file, e)
                logger.info("Using default configuration")
        else:
            logger.info("No configuration file found, using defaults")

        config.ensure_directories()
        return config

    def save(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        config.ensure_directories()
        config_file = config.get_config_file()

        try:
            with open(config_file, 'w') as f:
                json.dump(config.model_dump(), f, indent=2)
            logger.info("Configuration saved to %s", config_file)
        except OSError as e:
            logger.error("Error saving config to %s: %s", config_file, e)

    def update(self, **kwargs) -> None:
        """Update configuration values and save.

        Nested values use double underscores in place of dots, e.g.
        ``update(ui__theme="light")``; dotted keys passed via ``**{}`` work too.
        """
        config_dict = self.config.model_dump()

        for key, value in kwargs.items():
            keys = key.replace('__', '.').split('.')
            current = config_dict

            for k in keys[:-1]:
                if k not in current:
                    current[k] = {}
                current = current[k]

            current[keys[-1]] = value

        self._config = Config(**config_dict)
        self.save()

    def reset_to_defaults(self) -> None:
        """Reset configuration to defaults."""
        self._config = self._default_config()
        self.save()


# Global config manager instance
config_manager = ConfigManager()
