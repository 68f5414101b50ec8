"""
Contract Factory
Builds, sends and confirms contract creation transactions
"""

from dataclasses import dataclass
from typing import Any, Dict, List
from web3 import Web3
from loguru import logger

from .exceptions import DeploymentError
from .wallet_manager import WalletManager


@dataclass
class DeployedContract:
    """Contract instance confirmed on-chain"""

    name: str
    address: str
    transaction_hash: str
    contract: Any


class ContractFactory:
    """
    Deploys new instances of one compiled contract
    """

    def __init__(
        self,
        w3: Web3,
        name: str,
        abi: List[Dict],
        bytecode: str,
        wallet_manager: WalletManager
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            name: Contract name
            abi: Contract ABI
            bytecode: Creation bytecode
            wallet_manager: Wallet used to send the deployment
        """
        self.w3 = w3
        self.name = name
        self.abi = abi
        self.bytecode = bytecode
        self.wallet_manager = wallet_manager

    async def deploy(self, *args) -> DeployedContract:
        """
        Deploy a new instance and wait for it to be mined

        Args:
            *args: Constructor arguments, passed through as given

        Returns:
            Deployed contract handle
        """
        tx_hash = None

        try:
            Contract = self.w3.eth.contract(abi=self.abi, bytecode=self.bytecode)
            deployer = self.wallet_manager.get_deployer_address(self.w3)

            transaction = Contract.constructor(*args).build_transaction({
                'from': deployer,
                'nonce': self.w3.eth.get_transaction_count(deployer)
            })

            tx_hash = self.wallet_manager.send_transaction(self.w3, transaction)
            logger.debug(f"Deployment transaction sent: {tx_hash}")

            receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash)

        except Exception as e:
            logger.error(f"Error deploying {self.name}: {e}")
            raise DeploymentError(f"Failed to deploy {self.name}: {e}", tx_hash) from e

        if receipt['status'] != 1:
            logger.error(f"Deployment of {self.name} reverted: {tx_hash}")
            raise DeploymentError(
                f"Deployment transaction {tx_hash} for {self.name} reverted", tx_hash
            )

        address = Web3.to_checksum_address(receipt['contractAddress'])

        logger.debug(f"{self.name} mined in block {receipt['blockNumber']}, gas used {receipt['gasUsed']}")

        return DeployedContract(
            name=self.name,
            address=address,
            transaction_hash=tx_hash,
            contract=self.w3.eth.contract(address=address, abi=self.abi)
        )
