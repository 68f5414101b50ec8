"""
Wallet Manager
Holds the deployer account used to sign deployment transactions
"""

import os
from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from loguru import logger
from dotenv import load_dotenv

from .exceptions import ResolutionError

load_dotenv()


class WalletManager:
    """
    Manages the deployer wallet:
    - Local key (DEPLOYER_PRIVATE_KEY): transactions are signed here
    - No key: the node's first unlocked account sends them (Hardhat node)
    """

    def __init__(self, private_key: Optional[str] = None):
        """
        Initialize wallet manager

        Args:
            private_key: Deployer key (None = read DEPLOYER_PRIVATE_KEY)
        """
        private_key = private_key or os.getenv('DEPLOYER_PRIVATE_KEY')

        self.account = Account.from_key(private_key) if private_key else None

        if self.account:
            logger.debug(f"Deployer wallet: {self.account.address}")
        else:
            logger.debug("DEPLOYER_PRIVATE_KEY not set - using node account")

    @property
    def is_local(self) -> bool:
        """True when transactions are signed with a local key"""
        return self.account is not None

    def get_deployer_address(self, w3: Web3) -> str:
        """
        Get the address deployments are sent from

        Args:
            w3: Web3 instance

        Returns:
            Checksummed address
        """
        if self.account:
            return self.account.address

        accounts = w3.eth.accounts

        if not accounts:
            raise ResolutionError(
                "No DEPLOYER_PRIVATE_KEY set and the node exposes no unlocked accounts"
            )

        return Web3.to_checksum_address(accounts[0])

    def sign_transaction(self, transaction: Dict):
        """
        Sign a transaction with the deployer key

        Args:
            transaction: Transaction dict

        Returns:
            Signed transaction
        """
        if not self.account:
            raise ValueError("No local deployer key to sign with")

        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def send_transaction(self, w3: Web3, transaction: Dict) -> str:
        """
        Submit a transaction from the deployer

        Args:
            w3: Web3 instance
            transaction: Built transaction dict

        Returns:
            Transaction hash (hex)
        """
        if self.is_local:
            signed_tx = self.sign_transaction(transaction)
            tx_hash = w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        else:
            tx_hash = w3.eth.send_transaction(transaction)

        return Web3.to_hex(tx_hash)
