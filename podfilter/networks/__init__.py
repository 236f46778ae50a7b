"""Network registry used to canonicalize network filter values.

This package provides the NetworkRegistry protocol, the Network model, an
in-memory StaticNetworkRegistry and a YAML loader for it.
"""

from podfilter.networks.loader import load_network_registry
from podfilter.networks.models import Network, NetworkRegistryConfig
from podfilter.networks.registry import NetworkRegistry, StaticNetworkRegistry

__all__: list[str] = [
    "Network",
    "NetworkRegistryConfig",
    "NetworkRegistry",
    "StaticNetworkRegistry",
    "load_network_registry",
]
