"""Application settings using Pydantic."""
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from environment variables (WINNERS_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="WINNERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Parallel reduction
    chunk_size: int = Field(
        default=2,
        gt=0,
        description="Number of elements per partition in parallel drivers",
    )
    max_workers: Optional[int] = Field(
        default=None,
        gt=0,
        description="Thread pool size (None lets the executor decide)",
    )
    combine_strategy: Literal["tree", "pairwise"] = Field(
        default="tree",
        description="How partial accumulators are merged",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional rotating log file path",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent.parent / "config",
        description="Configuration directory",
    )

    @property
    def ratings_path(self) -> Path:
        """Path to the demo ratings.yaml file."""
        return self.config_dir / "ratings.yaml"


# Global settings instance
settings = Settings()
