"""
Blockchain Interaction Package
Handles network configuration, contract deployment and contract calls
"""

from .network_config import NetworkConfig, load_network_config
from .contract_deployer import ContractDeployer, DeploymentError
from .contract_manager import ContractManager

__all__ = [
    'NetworkConfig',
    'load_network_config',
    'ContractDeployer',
    'DeploymentError',
    'ContractManager'
]
