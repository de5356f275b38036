"""Decoder configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Decoder settings, read from LOTTIESTAG_* environment variables."""

    # Parallel decode
    DECODE_WORKERS: int = 1  # 1 decodes sequentially
    PARALLEL_MIN_LAYERS: int = 8  # Fewer top-level layers are decoded inline

    model_config = {"env_prefix": "LOTTIESTAG_"}


settings = Settings()
