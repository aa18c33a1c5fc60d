"""
Smart Contract Deployment Script
Deploys FlashLoanExecutor contract to Sepolia
"""

import sys
from typing import Dict
from web3 import Web3
from eth_account import Account
from loguru import logger

from blockchain.network_config import NetworkConfig, load_network_config
from blockchain.contract_deployer import ContractDeployer, DeploymentError
from blockchain.contract_manager import ContractManager
from utils.env_file import update_env_file
from utils.logging_config import setup_logging

CONTRACT_NAME = "FlashLoanExecutor"

# Aave V3 pool on Sepolia
AAVE_POOL_ADDRESS = "0x7b0d91c1c221542642591a2bf354911a3ef1b74a"


def deploy_flashloan_executor(config: NetworkConfig) -> Dict:
    """
    Deploy FlashLoanExecutor bound to the Aave pool

    Args:
        config: Network configuration

    Returns:
        Deployment result from ContractDeployer.deploy
    """
    w3 = Web3(Web3.HTTPProvider(config.rpc_url))

    if not w3.is_connected():
        raise DeploymentError(f"Failed to connect to {config.network_name}")

    account = Account.from_key(config.deployer_key)
    logger.info(f"Deploying from: {account.address}")

    balance = w3.eth.get_balance(account.address)
    logger.info(f"Account balance: {w3.from_wei(balance, 'ether')} ETH")

    deployer = ContractDeployer(w3, account, config.artifacts_dir)

    result = deployer.deploy(
        CONTRACT_NAME,
        [Web3.to_checksum_address(AAVE_POOL_ADDRESS)],
        timeout=config.deploy_timeout
    )

    # Receipt already confirmed the deployment; a failed code lookup is not fatal
    try:
        manager = ContractManager(w3, result['address'], abi=result['abi'])
        if not manager.is_deployed():
            logger.warning(f"Node reports no code at {result['address']} yet")
    except Exception as e:
        logger.warning(f"Could not verify code at {result['address']}: {e}")

    return result


def main(env_path: str = ".env") -> int:
    """
    Run deployment

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    try:
        config = load_network_config()
    except ValueError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Deploying {CONTRACT_NAME} contract...")

    try:
        result = deploy_flashloan_executor(config)
    except Exception as e:
        logger.opt(exception=e).error(f"Deployment failed: {e!r}")
        return 1

    print(f"{CONTRACT_NAME} contract successfully deployed at address: {result['address']}")
    logger.info(f"Transaction hash: {result['tx_hash']}")

    update_env_file('FLASHLOAN_CONTRACT_ADDRESS', result['address'], env_path)

    return 0


def run():
    """Console script entry point"""
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
