"""
System Check Script
Verifies configuration and network access before deploying
"""

import os
import sys
from web3 import Web3
from eth_account import Account
from loguru import logger

from blockchain.network_config import load_network_config
from blockchain.contract_deployer import ContractDeployer
from blockchain.contract_manager import ContractManager
from scripts.deploy_contract import CONTRACT_NAME
from utils.logging_config import setup_logging


def check_environment_variables():
    """Check if required environment variables are set"""
    logger.info("Checking environment variables...")

    try:
        load_network_config()
    except ValueError as e:
        logger.error(f"  ✗ {e}")
        return False

    logger.success("✓ All environment variables set")
    return True


def _connect():
    config = load_network_config()
    return config, Web3(Web3.HTTPProvider(config.rpc_url))


def check_rpc_connection():
    """Check RPC endpoint connection"""
    logger.info("Checking RPC connection...")

    config, w3 = _connect()

    if not w3.is_connected():
        logger.error(f"  ✗ {config.network_name}: Connection failed")
        return False

    logger.success(f"  ✓ {config.network_name}: Connected (Block: {w3.eth.block_number})")
    return True


def check_deployer_balance():
    """Check deployer wallet balance"""
    logger.info("Checking deployer balance...")

    config, w3 = _connect()
    address = Account.from_key(config.deployer_key).address

    balance = w3.eth.get_balance(address)
    logger.info(f"  Deployer {address}: {w3.from_wei(balance, 'ether')} ETH")

    if balance == 0:
        logger.error("  ✗ Deployer has no funds for gas")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def check_artifact():
    """Check compiled contract artifact"""
    logger.info("Checking contract artifact...")

    config = load_network_config()
    deployer = ContractDeployer(None, None, config.artifacts_dir)

    deployer.load_artifact(CONTRACT_NAME)
    logger.success(f"  ✓ {deployer.artifact_path(CONTRACT_NAME)}")
    return True


def check_contract_deployment():
    """Check previously deployed contract, if any"""
    logger.info("Checking smart contract deployment...")

    contract_address = os.getenv('FLASHLOAN_CONTRACT_ADDRESS')

    if not contract_address:
        logger.warning("  Contract not deployed yet")
        logger.info("  Run: python deploy.py")
        return True

    _, w3 = _connect()

    if not ContractManager(w3, contract_address).is_deployed():
        logger.error(f"  ✗ No contract at {contract_address}")
        return False

    logger.success(f"  ✓ Contract deployed at {contract_address}")
    return True


def main():
    """Run all system checks"""
    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    checks = [
        ("Environment Variables", check_environment_variables),
        ("Contract Artifact", check_artifact),
        ("RPC Connection", check_rpc_connection),
        ("Deployer Balance", check_deployer_balance),
        ("Contract Deployment", check_contract_deployment)
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func()
            results.append((name, result))
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            results.append((name, False))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python deploy.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    setup_logging(log_file=None)
    sys.exit(main())
