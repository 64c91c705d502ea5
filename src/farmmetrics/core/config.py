from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env file sits at the project root (parent of src/)
# Only use if it exists (CI uses environment variables directly)
# Path: core/config.py -> farmmetrics -> src -> project root -> .env
_ENV_FILE = Path(__file__).parent.parent.parent.parent / ".env"
_ENV_FILE = _ENV_FILE if _ENV_FILE.exists() else None


@lru_cache
def get_cache_dir() -> Path:
    """Project .cache/ directory, next to pyproject.toml (cwd when installed)."""
    here = Path(__file__).resolve()
    root = next((p for p in here.parents if (p / "pyproject.toml").exists()), Path.cwd())
    cache_dir = root / ".cache"
    cache_dir.mkdir(exist_ok=True)
    return cache_dir


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FARMMETRICS_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Display units for CLI output ("imperial" = °F/gallons/acres, "metric" = °C/liters/hectares)
    # Note: records are always stored in the units they were logged in (°F, gallons, acres)
    display_units: Literal["imperial", "metric"] = "imperial"

    # Default farm data file for the CLI (falls back to <cache>/farm_data.json)
    data_file: Path | None = None

    currency_symbol: str = "$"


settings = Settings()


def get_data_file() -> Path:
    """Resolve the farm data file used when the CLI gets no --data argument."""
    if settings.data_file is not None:
        return settings.data_file
    return get_cache_dir() / "farm_data.json"
