"""
Contract Manager
Resolves contract names to deployable factories
"""

import os
from typing import Optional
from web3 import Web3
from loguru import logger
from dotenv import load_dotenv

from .artifacts import load_artifact
from .contract_factory import ContractFactory
from .wallet_manager import WalletManager

load_dotenv()


class ContractManager:
    """
    Entry point for contract deployments on one network
    """

    def __init__(
        self,
        w3: Web3,
        wallet_manager: WalletManager,
        artifacts_dir: Optional[str] = None
    ):
        """
        Initialize Contract Manager

        Args:
            w3: Connected Web3 instance
            wallet_manager: Deployer wallet
            artifacts_dir: Hardhat artifacts root (None = ARTIFACTS_DIR or "artifacts")
        """
        self.w3 = w3
        self.wallet_manager = wallet_manager
        self.artifacts_dir = artifacts_dir or os.getenv('ARTIFACTS_DIR', 'artifacts')

        logger.debug(f"Contract Manager initialized (artifacts: {self.artifacts_dir})")

    async def get_contract_factory(self, contract_name: str) -> ContractFactory:
        """
        Get a factory for a compiled contract

        Args:
            contract_name: Bare or fully qualified contract name

        Returns:
            ContractFactory

        Raises:
            ResolutionError: contract not found or not deployable
        """
        artifact = load_artifact(contract_name, self.artifacts_dir)

        return ContractFactory(
            self.w3,
            artifact.get('contractName', contract_name),
            artifact['abi'],
            artifact['bytecode'],
            self.wallet_manager
        )
