"""
Network configuration for the EthQR SDK.

Named networks map to chain ids. The registry ships with the package as
``networks.json`` and can be replaced by pointing ``ETHQR_NETWORKS_FILE`` at
another JSON file of the same shape.
"""
import importlib.resources
import json
import logging
import os
from typing import Any, Dict, Optional

from .exceptions import NetworkConfigError

logger = logging.getLogger(__name__)

NETWORKS_FILE_ENV = "ETHQR_NETWORKS_FILE"


class NetworkConfig:
    """Class-level cached registry of named networks"""

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load the network registry, caching it after the first read

        Returns:
            Mapping of network name to its configuration

        Raises:
            NetworkConfigError: If the registry cannot be read or parsed
        """
        if cls._networks_cache is not None:
            return cls._networks_cache

        override = os.environ.get(NETWORKS_FILE_ENV)
        try:
            if override:
                logger.debug(f"Loading networks from {override}")
                with open(override, "r", encoding="utf-8") as f:
                    networks = json.load(f)
            else:
                resource = importlib.resources.files("ethqr_sdk").joinpath("networks.json")
                networks = json.loads(resource.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise NetworkConfigError(f"Failed to load network registry: {e}") from e

        if not isinstance(networks, dict):
            raise NetworkConfigError("Network registry must be a JSON object")

        cls._networks_cache = networks
        return networks

    @classmethod
    def get_network(cls, network: str) -> Dict[str, Any]:
        """
        Get the configuration of a named network

        Raises:
            NetworkConfigError: If the network is unknown
        """
        networks = cls.load_networks()
        if network not in networks:
            available = ", ".join(sorted(networks))
            raise NetworkConfigError(f"Network '{network}' not found. Available networks: {available}")
        return networks[network]

    @classmethod
    def get_chain_id(cls, network: str) -> int:
        """
        Get the chain id of a named network

        Raises:
            NetworkConfigError: If the network is unknown or has no valid chainId
        """
        chain_id = cls.get_network(network).get("chainId")
        if not isinstance(chain_id, int) or isinstance(chain_id, bool) or chain_id <= 0:
            raise NetworkConfigError(f"Network '{network}' has an invalid chainId: {chain_id!r}")
        return chain_id

    @classmethod
    def find_network_name(cls, chain_id: int) -> Optional[str]:
        """Reverse lookup of a network name by chain id, None when unknown"""
        for name, config in cls.load_networks().items():
            if config.get("chainId") == chain_id:
                return name
        return None
