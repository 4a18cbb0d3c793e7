"""Configuration loader for the novel corpus segmenter."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_HEADING_PATTERN = r"^chapter\s+[\divxlc]"


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Novel Corpus Segmenter"
    version: str = "1.0.0"
    log_level: str = "INFO"


class SegmentationConfig(BaseModel):
    """Chapter detection and document assembly settings."""

    heading_pattern: str = DEFAULT_HEADING_PATTERN
    ignore_case: bool = True
    separator: str = " "


class CorpusConfig(BaseModel):
    """Where the raw book files live."""

    corpus_dir: str = "./data/novels"
    extensions: list[str] = Field(default_factory=lambda: [".txt"])


class StorageConfig(BaseModel):
    """Storage paths configuration."""

    sqlite_path: str = "./db/corpus.db"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Path overrides from environment
    corpus_dir = os.getenv("NOVELSEG_CORPUS_DIR")
    if corpus_dir:
        config.corpus.corpus_dir = corpus_dir
    sqlite_path = os.getenv("NOVELSEG_SQLITE_PATH")
    if sqlite_path:
        config.storage.sqlite_path = sqlite_path

    return config
