"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from SWEEPHULL_* environment variables."""

    # Triangulation
    edge_stack_size: int = Field(
        default=512, ge=1, description="Capacity of the edge flip stack used by legalization"
    )
    insertion_sort_threshold: int = Field(
        default=20, ge=1, description="Span at or below which quicksort falls back to insertion sort"
    )

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    max_points: int = Field(
        default=1_000_000, description="Largest point set accepted by the API"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    class Config:
        env_prefix = "SWEEPHULL_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
