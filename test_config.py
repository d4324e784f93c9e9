#!/usr/bin/env python3
"""
Test script for configuration system.
"""
import json
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from game_shelf.config.settings import (
    CONFIG_DIR_ENV, IMAGE_API_KEY_ENV, Config, ConfigManager,
    ImageSearchConfig, StorageConfig, UIConfig
)


def test_default_config():
    """Test default configuration creation."""
    print("=== Testing Default Configuration ===")

    config = Config()
    print(f"Default theme: {config.ui.theme}")
    print(f"Storage key: {config.storage.storage_key}")
    print(f"Export file: {config.storage.export_filename}")
    print(f"Data directory: {config.get_data_dir()}")

    assert config.ui.theme == "dark"
    assert config.storage.storage_key == "games"
    assert config.storage.export_filename == "games_export.json"
    assert config.storage.seed_on_first_run is True
    assert config.image_search.max_results == 10
    assert config.get_data_dir() == Path.home() / ".config/game-shelf"
    assert config.get_export_file().name == "games_export.json"
    print()


def test_config_validation():
    """Test configuration validation."""
    print("=== Testing Configuration Validation ===")

    with pytest.raises(ValidationError):
        StorageConfig(export_filename="games.txt")
    print("✅ Correctly rejected non-JSON export file")

    with pytest.raises(ValidationError):
        ImageSearchConfig(max_results=11)
    with pytest.raises(ValidationError):
        ImageSearchConfig(max_results=0)
    print("✅ Correctly rejected out-of-range result counts")

    with pytest.raises(ValidationError):
        UIConfig(theme="neon")
    print("✅ Correctly rejected unknown theme")
    print()


def test_data_dir_override():
    """Test that an explicit data dir moves storage, exports and logs."""
    print("=== Testing Data Directory Override ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        config = Config()
        config.directories.config = str(Path(temp_dir) / "cfg")
        config.directories.data_dir = str(Path(temp_dir) / "data")
        config.ensure_directories()

        assert config.get_storage_dir() == Path(temp_dir) / "data" / "storage"
        assert config.get_exports_dir().exists()
        assert config.get_logs_dir().exists()
        assert config.get_config_file() == Path(temp_dir) / "cfg" / "config.json"
        print(f"✅ Storage dir: {config.get_storage_dir()}")
    print()


def test_config_manager(monkeypatch):
    """Test configuration manager save/load/update."""
    print("=== Testing Configuration Manager ===")

    monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)
    with tempfile.TemporaryDirectory() as temp_dir:
        config_dir = str(Path(temp_dir) / "test-config")

        manager = ConfigManager(config_dir=config_dir)
        assert manager.config.get_config_dir() == Path(config_dir)

        manager.update(ui__theme="light", **{"storage.seed_on_first_run": False})
        config_file = Path(config_dir) / "config.json"
        assert config_file.exists()
        saved = json.loads(config_file.read_text())
        assert saved["ui"]["theme"] == "light"
        assert saved["storage"]["seed_on_first_run"] is False
        print(f"✅ Config saved to: {config_file}")

        reloaded = ConfigManager(config_dir=config_dir)
        assert reloaded.config.ui.theme == "light"
        assert reloaded.config.storage.seed_on_first_run is False

        reloaded.reset_to_defaults()
        assert ConfigManager(config_dir=config_dir).config.ui.theme == "dark"
        print("✅ Reset to defaults persisted")

        config_file.write_text("{broken")
        assert ConfigManager(config_dir=config_dir).config.ui.theme == "dark"
        print("✅ Broken config file falls back to defaults")
    print()


def test_environment(monkeypatch):
    """Test environment variable overrides."""
    print("=== Testing Environment Overrides ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        monkeypatch.setenv(CONFIG_DIR_ENV, temp_dir)
        assert ConfigManager().config.get_config_dir() == Path(temp_dir)

    monkeypatch.delenv(IMAGE_API_KEY_ENV, raising=False)
    assert ImageSearchConfig().resolved_api_key() is None
    monkeypatch.setenv(IMAGE_API_KEY_ENV, "env-key")
    assert ImageSearchConfig().resolved_api_key() == "env-key"
    assert ImageSearchConfig(api_key="file-key").resolved_api_key() == "file-key"
    print("✅ Config dir and API key read from the environment")
    print()


def main():
    """Run all configuration tests."""
    print("Game Shelf - Configuration Testing")
    print("=" * 45)

    try:
        test_default_config()
        test_config_validation()
        test_data_dir_override()
        with pytest.MonkeyPatch.context() as monkeypatch:
            test_config_manager(monkeypatch)
            test_environment(monkeypatch)

        print("✅ All configuration tests completed successfully!")

    except Exception as e:
        print(f"❌ Configuration test failed: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
