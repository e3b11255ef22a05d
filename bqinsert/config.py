"""BQInsert — Central Configuration via Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment variables / .env file."""

    # ── Compression ──
    gzip_enabled: bool = True
    gzip_compression_level: int = Field(
        default=6, ge=-1, le=9, description="zlib level, -1 picks zlib's default"
    )

    # ── Logging ──
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "BQINSERT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
