"""Application configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "locsync"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    frontend_port: int = 5173

    # Source catalog
    source_locale: str = "en"

    # Batch translation settings
    default_batch_size: int = 5  # texts per provider call
    default_concurrency: int = 10  # provider calls in flight per wave
    wave_delay_seconds: float = 0.05  # pause between waves

    # Provider transport
    llm_request_timeout: int = 120
    azure_api_version: str = "2025-01-01-preview"
    github_models_base_url: str = "https://models.inference.ai.azure.com"
    bedrock_temperature: float = 0.3
    bedrock_max_tokens: int = 4096

    # CORS - dynamically built based on frontend_port
    cors_origins: list[str] = []

    model_config = SettingsConfigDict(
        env_prefix="LOCSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Build CORS origins based on frontend port
        if not self.cors_origins:
            self.cors_origins = [
                f"http://localhost:{self.frontend_port}",
                f"http://127.0.0.1:{self.frontend_port}",
            ]


settings = Settings()


def resolve_batching(
    batch_size: Optional[int] = None,
    concurrency: Optional[int] = None,
) -> tuple[int, int]:
    """Apply settings defaults to per-call batch size and concurrency.

    Raises:
        ValueError: If either value is lower than 1
    """
    size = settings.default_batch_size if batch_size is None else batch_size
    parallel = settings.default_concurrency if concurrency is None else concurrency
    if size < 1:
        raise ValueError(f"batch_size must be at least 1, got {size}")
    if parallel < 1:
        raise ValueError(f"concurrency must be at least 1, got {parallel}")
    return size, parallel
