"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from novelseg.config import DEFAULT_HEADING_PATTERN, AppConfig, load_config

PROJECT_CONFIG = Path(__file__).parent.parent / "config.yaml"


class TestAppConfigDefaults:
    """Test that AppConfig provides sensible defaults."""

    def test_default_config_creates_successfully(self) -> None:
        config = AppConfig()
        assert config.app.name == "Novel Corpus Segmenter"
        assert config.app.log_level == "INFO"

    def test_default_segmentation_config(self) -> None:
        config = AppConfig()
        assert config.segmentation.heading_pattern == DEFAULT_HEADING_PATTERN
        assert config.segmentation.ignore_case is True
        assert config.segmentation.separator == " "

    def test_default_corpus_config(self) -> None:
        config = AppConfig()
        assert config.corpus.corpus_dir == "./data/novels"
        assert config.corpus.extensions == [".txt"]

    def test_default_storage_config(self) -> None:
        config = AppConfig()
        assert config.storage.sqlite_path == "./db/corpus.db"


class TestLoadConfig:
    """Test loading config from YAML files."""

    @pytest.fixture(autouse=True)
    def _clear_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NOVELSEG_CORPUS_DIR", raising=False)
        monkeypatch.delenv("NOVELSEG_SQLITE_PATH", raising=False)

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        yaml_data = {
            "app": {"name": "Test App", "version": "0.1.0"},
            "segmentation": {"heading_pattern": r"^book\s+\w+", "separator": "\n"},
        }
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump(yaml_data))

        config = load_config(config_file)
        assert config.app.name == "Test App"
        assert config.segmentation.heading_pattern == r"^book\s+\w+"
        assert config.segmentation.separator == "\n"
        # Other fields keep defaults
        assert config.segmentation.ignore_case is True
        assert config.storage.sqlite_path == "./db/corpus.db"

    def test_load_missing_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.app.name == "Novel Corpus Segmenter"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        config = load_config(config_file)
        assert config.corpus.corpus_dir == "./data/novels"

    def test_env_vars_override_paths(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("{}")

        monkeypatch.setenv("NOVELSEG_CORPUS_DIR", "/corpora/austen")
        monkeypatch.setenv("NOVELSEG_SQLITE_PATH", "/tmp/austen.db")

        config = load_config(config_file)
        assert config.corpus.corpus_dir == "/corpora/austen"
        assert config.storage.sqlite_path == "/tmp/austen.db"

    def test_load_project_config_yaml(self) -> None:
        """Test loading the actual project config.yaml."""
        config = load_config(PROJECT_CONFIG)
        assert config.app.name == "Novel Corpus Segmenter"
        assert config.segmentation.heading_pattern == DEFAULT_HEADING_PATTERN
        assert config.storage.sqlite_path == "./db/corpus.db"
