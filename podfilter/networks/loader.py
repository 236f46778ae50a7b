"""YAML loader for static network registries.

Example YAML format:
    networks:
      - name: podman
        id: 2f259bab93aaaaa2542ba43ef33eb990d0999ee1b9924b557b7be53c0b7a1bb9
        driver: bridge
      - name: backend
        id: 8e1b7d2c4f0a...

Functions:
    load_network_registry: Build a StaticNetworkRegistry from a YAML file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from podfilter.config import get_settings
from podfilter.errors import NetworkConfigError
from podfilter.networks.models import NetworkRegistryConfig
from podfilter.networks.registry import StaticNetworkRegistry

logger = logging.getLogger(__name__)


def load_network_registry(path: Path | str | None = None) -> StaticNetworkRegistry:
    """Load a static network registry from a YAML file.

    Args:
        path: Registry file. Defaults to the ``networks_file`` setting.

    Returns:
        StaticNetworkRegistry over the networks in the file. An empty file
        yields an empty registry.

    Raises:
        NetworkConfigError: If no path is available, the file cannot be read,
            or its content fails validation.
    """
    if path is None:
        path = get_settings().networks_file
        if path is None:
            raise NetworkConfigError("No network registry file configured")
    path = Path(path)

    if not path.exists():
        raise NetworkConfigError(f"Network registry file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise NetworkConfigError(f"YAML syntax error in {path}: {e}") from e
    except OSError as e:
        raise NetworkConfigError(f"Failed to read {path}: {e}") from e

    if data is None:
        data = {}

    try:
        config = NetworkRegistryConfig.model_validate(data)
    except ValidationError as e:
        error_messages = []
        for error in e.errors():
            loc = ".".join(str(loc) for loc in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")
        raise NetworkConfigError(
            f"Validation failed for {path}: {'; '.join(error_messages)}"
        ) from e

    logger.info(f"Loaded {len(config.networks)} networks from {path}")
    return StaticNetworkRegistry(config.networks)


__all__ = ["load_network_registry"]
