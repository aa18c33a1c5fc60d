"""
Network Configuration
Loads RPC endpoint and deployer credentials from environment
"""

import os
from typing import List
from loguru import logger
from dotenv import load_dotenv

load_dotenv()

NETWORK_NAME = 'sepolia'
SOLIDITY_VERSION = '0.8.20'
DEFAULT_ARTIFACTS_DIR = 'artifacts/contracts'
DEFAULT_DEPLOY_TIMEOUT = 300


class NetworkConfig:
    """
    Network settings for contract deployment
    """

    def __init__(
        self,
        rpc_url: str,
        accounts: List[str],
        network_name: str = NETWORK_NAME,
        solidity_version: str = SOLIDITY_VERSION,
        artifacts_dir: str = DEFAULT_ARTIFACTS_DIR,
        deploy_timeout: int = DEFAULT_DEPLOY_TIMEOUT
    ):
        self.rpc_url = rpc_url
        self.accounts = accounts
        self.network_name = network_name
        self.solidity_version = solidity_version
        self.artifacts_dir = artifacts_dir
        self.deploy_timeout = deploy_timeout

    @property
    def deployer_key(self) -> str:
        """Private key of the deploying account"""
        return self.accounts[0]

    def __repr__(self):
        # Keys stay out of logs
        return (
            f"NetworkConfig(network={self.network_name!r}, rpc_url={self.rpc_url!r}, "
            f"accounts={len(self.accounts)}, solidity={self.solidity_version!r})"
        )


def _require(name: str) -> str:
    value = (os.getenv(name) or '').strip()

    if not value:
        raise ValueError(f"{name} was not found in your .env")

    return value


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(name)

    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")

    if value <= 0:
        raise ValueError(f"{name} must be positive")

    return value


def load_network_config() -> NetworkConfig:
    """
    Build network configuration from environment variables

    Raises:
        ValueError: If ALCHEMY_HTTPS_URL or BOT_PRIVATE_KEY is missing

    Returns:
        NetworkConfig for the deployment network
    """
    rpc_url = _require('ALCHEMY_HTTPS_URL')
    private_key = _require('BOT_PRIVATE_KEY')

    config = NetworkConfig(
        rpc_url=rpc_url,
        accounts=[private_key],
        artifacts_dir=os.getenv('ARTIFACTS_DIR') or DEFAULT_ARTIFACTS_DIR,
        deploy_timeout=_int_setting('DEPLOY_TIMEOUT_SECONDS', DEFAULT_DEPLOY_TIMEOUT)
    )

    logger.debug(f"Loaded {config}")
    return config
