"""Runtime settings for podfilter.

Settings are read from environment variables prefixed with ``PODFILTER_``
and, if present, a local ``.env`` file.

Usage:
    from podfilter.config import get_settings

    settings = get_settings()
    if settings.ctr_names_first_child_only:
        ...
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class FilterSettings(BaseSettings):
    # Legacy ctr-names behavior: decide using only the first child container
    ctr_names_first_child_only: bool = False

    # Default network registry file for load_network_registry()
    networks_file: Path | None = None

    model_config = SettingsConfigDict(env_prefix="PODFILTER_", env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> FilterSettings:
    """Get the settings singleton.

    Returns:
        FilterSettings instance populated from the environment.
    """
    return FilterSettings()
