from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field


class PathsConfig(BaseModel):
    base_dir: str = Field(default=".")
    log_dir: str = Field(default="logs")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    rotation: str = Field(default="10 MB")
    retention: str = Field(default="10 days")
    file_stem: str = Field(default="shorts_ideas")
    json_sink: bool = Field(default=True)


class IngestionConfig(BaseModel):
    transcript_languages: List[str] = Field(default_factory=lambda: ["en"])
    channel_video_limit: int = Field(default=3)
    cookies_file: Optional[str] = Field(default=None)


class SegmentationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    window_min_seconds: float = Field(default=30)
    window_max_seconds: float = Field(default=60)
    growth_slack_seconds: float = Field(default=10)
    min_duration_ratio: float = Field(default=0.8)
    max_duration_slack_seconds: float = Field(default=2)
    keywords_per_segment: int = Field(default=6)
    max_candidates: int = Field(default=6)

    @property
    def growth_limit_seconds(self) -> float:
        return self.window_max_seconds + self.growth_slack_seconds

    @property
    def min_clip_seconds(self) -> float:
        return self.window_min_seconds * self.min_duration_ratio

    @property
    def max_clip_seconds(self) -> float:
        return self.window_max_seconds + self.max_duration_slack_seconds


class PackagingConfig(BaseModel):
    ideas_per_video: int = Field(default=3)
    ideas_per_channel: int = Field(default=3)
    fallback_keywords: int = Field(default=5)


class AppConfig(BaseModel):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    packaging: PackagingConfig = Field(default_factory=PackagingConfig)


class ConfigManager:
    """
    Manages loading and validation of application configuration.
    """

    def __init__(self, config_path: str = "config/settings.yaml", config: Optional[AppConfig] = None):
        self.config_path = Path(config_path)
        self.config: AppConfig = config if config is not None else self._load_config()

    @classmethod
    def from_defaults(cls) -> "ConfigManager":
        """Builds a manager holding the built-in defaults, without touching disk."""
        return cls(config=AppConfig())

    def _load_config(self) -> AppConfig:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found at {self.config_path}")

        with open(self.config_path, "r") as f:
            raw_config = yaml.safe_load(f) or {}

        return AppConfig(**raw_config)

    @property
    def paths(self) -> PathsConfig:
        return self.config.paths

    @property
    def ingestion(self) -> IngestionConfig:
        return self.config.ingestion

    @property
    def segmentation(self) -> SegmentationConfig:
        return self.config.segmentation

    @property
    def packaging(self) -> PackagingConfig:
        return self.config.packaging

    @property
    def logging(self) -> LoggingConfig:
        return self.config.logging
