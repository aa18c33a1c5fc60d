"""
Contract Manager
Handles interactions with a deployed FlashLoanExecutor
"""

from typing import Dict, List, Optional
from web3 import Web3
from loguru import logger

START_ARBITRAGE_GAS = 1000000


class ContractManager:
    """
    Binds a deployed FlashLoanExecutor contract
    """

    def __init__(self, w3: Web3, contract_address: str, abi: Optional[List[Dict]] = None):
        """
        Initialize Contract Manager

        Args:
            w3: Web3 instance
            contract_address: Deployed FlashLoanExecutor address
            abi: Contract ABI (minimal ABI used when None)
        """
        self.w3 = w3
        self.contract_address = Web3.to_checksum_address(contract_address)

        if abi is None:
            abi = self._get_minimal_executor_abi()

        self.executor_contract = self.w3.eth.contract(
            address=self.contract_address,
            abi=abi
        )

    def is_deployed(self) -> bool:
        """Check that code exists at the contract address"""
        code = self.w3.eth.get_code(self.contract_address)

        if not code or code in (b'', '0x'):
            logger.debug(f"No code at {self.contract_address}")
            return False

        return True

    def build_start_arbitrage_tx(
        self,
        token_in: str,
        token_out: str,
        amount: int,
        router_buy: str,
        router_sell: str,
        sender: str
    ) -> Dict:
        """
        Build startArbitrage transaction (unsigned)

        Args:
            token_in: Token borrowed from the pool
            token_out: Intermediate token
            amount: Loan amount in wei
            router_buy: Router used for the first swap
            router_sell: Router used for the second swap
            sender: Address submitting the call

        Returns:
            Transaction dict
        """
        if amount <= 0:
            raise ValueError("Flashloan amount must be positive")

        sender = Web3.to_checksum_address(sender)

        tx = self.executor_contract.functions.startArbitrage(
            Web3.to_checksum_address(token_in),
            Web3.to_checksum_address(token_out),
            amount,
            Web3.to_checksum_address(router_buy),
            Web3.to_checksum_address(router_sell)
        ).build_transaction({
            'from': sender,
            'nonce': self.w3.eth.get_transaction_count(sender),
            'gas': START_ARBITRAGE_GAS,
            'gasPrice': self.w3.eth.gas_price,
            'value': 0
        })

        logger.debug(f"startArbitrage tx built for {self.contract_address}")
        return tx

    def _get_minimal_executor_abi(self) -> List[Dict]:
        """
        Get minimal ABI for FlashLoanExecutor contract
        Used when compiled artifacts are not available
        """
        return [
            {
                "inputs": [{"name": "_poolAddress", "type": "address"}],
                "stateMutability": "nonpayable",
                "type": "constructor"
            },
            {
                "inputs": [
                    {"name": "_tokenIn", "type": "address"},
                    {"name": "_tokenOut", "type": "address"},
                    {"name": "_amount", "type": "uint256"},
                    {"name": "_routerBuy", "type": "address"},
                    {"name": "_routerSell", "type": "address"}
                ],
                "name": "startArbitrage",
                "outputs": [],
                "stateMutability": "nonpayable",
                "type": "function"
            },
            {
                "inputs": [
                    {"name": "asset", "type": "address"},
                    {"name": "amount", "type": "uint256"},
                    {"name": "premium", "type": "uint256"},
                    {"name": "initiator", "type": "address"},
                    {"name": "params", "type": "bytes"}
                ],
                "name": "executeOperation",
                "outputs": [{"name": "", "type": "bool"}],
                "stateMutability": "nonpayable",
                "type": "function"
            }
        ]
