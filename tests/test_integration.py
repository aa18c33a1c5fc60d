"""
Integration Tests
Deploys FlashLoanExecutor to a local Hardhat node
"""

import os
import pytest
from web3 import Web3
from eth_account import Account

from blockchain.contract_deployer import ContractDeployer
from blockchain.contract_manager import ContractManager
from scripts.deploy_contract import AAVE_POOL_ADDRESS, CONTRACT_NAME


# Note: These tests require a local Hardhat node and compiled artifacts
# Run: npx hardhat compile && npx hardhat node
# Then: pytest tests/test_integration.py

LOCAL_RPC_URL = os.getenv('HARDHAT_RPC_URL', 'http://127.0.0.1:8545')

# Hardhat default account #0
LOCAL_PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'


@pytest.fixture
def w3():
    """Connect to local Hardhat node"""
    w3 = Web3(Web3.HTTPProvider(LOCAL_RPC_URL))

    if not w3.is_connected():
        pytest.skip(f"No node at {LOCAL_RPC_URL}")

    return w3


@pytest.fixture
def deployer(w3):
    deployer = ContractDeployer(w3, Account.from_key(LOCAL_PRIVATE_KEY))

    if not os.path.exists(deployer.artifact_path(CONTRACT_NAME)):
        pytest.skip("FlashLoanExecutor artifact not compiled")

    return deployer


class TestLocalDeployment:
    """Deploy against a live local node"""

    def test_deployment(self, w3, deployer):
        result = deployer.deploy(
            CONTRACT_NAME,
            [Web3.to_checksum_address(AAVE_POOL_ADDRESS)],
            timeout=30
        )

        assert Web3.is_checksum_address(result['address'])
        assert result['gas_used'] > 0

        assert ContractManager(w3, result['address'], abi=result['abi']).is_deployed()


if __name__ == "__main__":
    pytest.main([__file__, '-v'])
