"""
Contract Deployer
Builds, signs and submits contract deployment transactions
"""

import os
import json
from typing import Dict, Optional, Sequence
from web3 import Web3
from loguru import logger

from .network_config import DEFAULT_ARTIFACTS_DIR, DEFAULT_DEPLOY_TIMEOUT

DEFAULT_GAS_LIMIT = 3000000
GAS_BUFFER = 1.2


class DeploymentError(Exception):
    """Deployment transaction could not be completed"""


class ContractDeployer:
    """
    Deploys compiled Hardhat artifacts from a local account
    """

    def __init__(self, w3: Web3, account, artifacts_dir: str = DEFAULT_ARTIFACTS_DIR):
        """
        Initialize Contract Deployer

        Args:
            w3: Web3 instance
            account: Local account used to sign (eth_account LocalAccount)
            artifacts_dir: Hardhat artifacts/contracts directory
        """
        self.w3 = w3
        self.account = account
        self.artifacts_dir = artifacts_dir

    def artifact_path(self, contract_name: str) -> str:
        return os.path.join(
            self.artifacts_dir,
            f"{contract_name}.sol",
            f"{contract_name}.json"
        )

    def load_artifact(self, contract_name: str) -> Dict:
        """
        Load compiled contract artifact

        Args:
            contract_name: Contract name (e.g. FlashLoanExecutor)

        Returns:
            Artifact dict with 'abi' and 'bytecode'
        """
        path = self.artifact_path(contract_name)

        if not os.path.exists(path):
            raise FileNotFoundError(
                f"Contract artifact not found: {path} (run 'npx hardhat compile' first)"
            )

        with open(path, 'r') as f:
            artifact = json.load(f)

        bytecode = artifact.get('bytecode') or ''
        if bytecode in ('', '0x'):
            raise DeploymentError(f"{contract_name} has no deployable bytecode")

        return artifact

    def estimate_gas(self, constructor) -> int:
        """Estimate deployment gas with a 20% buffer"""
        try:
            gas_estimate = constructor.estimate_gas({
                'from': self.account.address
            })
            return int(gas_estimate * GAS_BUFFER)
        except Exception as e:
            logger.warning(f"Gas estimation failed: {e}, using default")
            return DEFAULT_GAS_LIMIT

    def build_deploy_transaction(
        self,
        contract_name: str,
        constructor_args: Sequence = (),
        artifact: Optional[Dict] = None
    ) -> Dict:
        """
        Build unsigned deployment transaction

        Args:
            contract_name: Contract to deploy
            constructor_args: Constructor arguments in ABI order
            artifact: Already loaded artifact (read from disk when None)

        Returns:
            Transaction dict
        """
        if artifact is None:
            artifact = self.load_artifact(contract_name)

        Contract = self.w3.eth.contract(
            abi=artifact['abi'],
            bytecode=artifact['bytecode']
        )
        constructor = Contract.constructor(*constructor_args)

        gas_limit = self.estimate_gas(constructor)
        gas_price = self.w3.eth.gas_price

        logger.info(f"Gas limit: {gas_limit}")
        logger.info(f"Gas price: {self.w3.from_wei(gas_price, 'gwei')} gwei")

        return constructor.build_transaction({
            'from': self.account.address,
            'nonce': self.w3.eth.get_transaction_count(self.account.address, 'pending'),
            'gas': gas_limit,
            'gasPrice': gas_price,
            'chainId': self.w3.eth.chain_id
        })

    def deploy(
        self,
        contract_name: str,
        constructor_args: Sequence = (),
        timeout: int = DEFAULT_DEPLOY_TIMEOUT
    ) -> Dict:
        """
        Deploy contract and wait for confirmation

        Args:
            contract_name: Contract to deploy
            constructor_args: Constructor arguments in ABI order
            timeout: Seconds to wait for the receipt

        Returns:
            Deployment result (address, ABI, tx hash, gas used, block)
        """
        logger.info(f"Building {contract_name} deployment transaction...")
        artifact = self.load_artifact(contract_name)
        transaction = self.build_deploy_transaction(contract_name, constructor_args, artifact)

        signed_tx = self.account.sign_transaction(transaction)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        tx_hash_hex = Web3.to_hex(tx_hash)

        logger.info(f"Transaction sent: {tx_hash_hex}")
        logger.info("Waiting for confirmation...")

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)

        if receipt['status'] != 1:
            raise DeploymentError(f"Deployment transaction {tx_hash_hex} failed")

        contract_address = receipt['contractAddress']
        if not contract_address:
            raise DeploymentError(f"Receipt for {tx_hash_hex} has no contract address")

        logger.success(f"{contract_name} confirmed in block {receipt['blockNumber']}")
        logger.debug(f"Gas used: {receipt['gasUsed']}")

        return {
            'contract_name': contract_name,
            'address': contract_address,
            'abi': artifact['abi'],
            'tx_hash': tx_hash_hex,
            'gas_used': receipt['gasUsed'],
            'block_number': receipt['blockNumber']
        }
