# bulwark/settings.py
"""Runtime settings, overridable via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Headless runner and simulation settings (``BULWARK_*`` env vars)."""

    # Simulation
    SEED: int | None = None
    INITIAL_MISSILES: int = 5
    SPAWN_PROBABILITY: float = 0.01

    # Host
    FRAME_RATE: float = 60.0
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="BULWARK_", env_file=".env", extra="ignore")


settings = Settings()
