"""
Network Connection
Resolves the deployment target network and returns a connected Web3
"""

import os
import json
from typing import Dict, Optional
from web3 import Web3, EthereumTesterProvider
from loguru import logger
from dotenv import load_dotenv

from toolchain.errors import NetworkError

load_dotenv()

DEFAULT_CONFIG_PATH = "config/network_config.json"


def load_network_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict:
    """Load network definitions from JSON config"""
    with open(config_path, 'r') as f:
        return json.load(f)


def resolve_network(config: Dict, network_name: Optional[str] = None) -> Dict:
    """
    Pick the target network

    Args:
        config: Network config
        network_name: Explicit network (None = DEPLOY_NETWORK env, then default)

    Returns:
        Network entry with its key added under 'key'
    """
    name = network_name or os.getenv('DEPLOY_NETWORK') or config['default_network']
    networks = config['networks']

    if name not in networks:
        raise NetworkError(
            f"Unknown network '{name}' (available: {', '.join(sorted(networks))})"
        )

    return dict(networks[name], key=name)


def _build_provider(network: Dict):
    """Create the Web3 provider for a network entry"""
    if network.get('provider') == 'eth_tester':
        return EthereumTesterProvider()

    url = network.get('http_url')
    if not url and network.get('http_url_env'):
        url = os.getenv(network['http_url_env'])

    if not url:
        raise NetworkError(
            f"No RPC URL for network '{network['key']}' "
            f"(set {network.get('http_url_env', 'http_url')})"
        )

    return Web3.HTTPProvider(url)


def connect(network_name: Optional[str] = None, config_path: str = DEFAULT_CONFIG_PATH) -> Web3:
    """
    Connect to the target network

    Args:
        network_name: Network key from config (None = environment/default)
        config_path: Path to network config file

    Returns:
        Connected Web3 instance
    """
    network = resolve_network(load_network_config(config_path), network_name)
    w3 = Web3(_build_provider(network))

    if not w3.is_connected():
        raise NetworkError(f"Failed to connect to {network.get('name', network['key'])}")

    expected_chain_id = network.get('chain_id')
    if expected_chain_id is not None and w3.eth.chain_id != expected_chain_id:
        raise NetworkError(
            f"Network '{network['key']}' expects chain {expected_chain_id}, "
            f"node reports {w3.eth.chain_id}"
        )

    logger.debug(f"Connected to {network.get('name', network['key'])}")
    return w3
