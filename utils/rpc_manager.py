"""
RPC Manager
Connects to the JSON-RPC endpoint deployments are sent to
"""

import os
from typing import Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from blockchain.exceptions import ResolutionError

load_dotenv()

DEFAULT_RPC_URL = 'http://127.0.0.1:8545'


class RPCManager:
    """
    Single-endpoint RPC connection

    Defaults to a local Hardhat node; set RPC_URL to target another network.
    """

    def __init__(self, rpc_url: Optional[str] = None):
        """
        Initialize RPC Manager

        Args:
            rpc_url: HTTP endpoint (None = RPC_URL or local node)
        """
        self.rpc_url = rpc_url or os.getenv('RPC_URL', DEFAULT_RPC_URL)
        self.w3 = None

    def get_web3(self) -> Web3:
        """
        Get a connected Web3 instance

        Returns:
            Web3 instance

        Raises:
            ResolutionError: endpoint unreachable
        """
        if self.w3 is not None:
            return self.w3

        w3 = Web3(Web3.HTTPProvider(self.rpc_url))

        if not w3.is_connected():
            raise ResolutionError(f"Failed to connect to network at {self.rpc_url}")

        logger.debug(f"Connected to {self.rpc_url} (chain {w3.eth.chain_id})")

        self.w3 = w3
        return w3
