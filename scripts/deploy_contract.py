"""
Smart Contract Deployment Script
Deploys the SixElements contract with its fixed constructor argument

Usage:
    python -m scripts.deploy_contract
"""

import os
import sys
import asyncio
from dataclasses import dataclass
from typing import Optional, Tuple
from loguru import logger
from dotenv import load_dotenv

from blockchain import ContractManager, DeployedContract, WalletManager
from utils import RPCManager

load_dotenv()


@dataclass(frozen=True)
class DeploymentConfig:
    """What to deploy and with which constructor arguments"""

    contract_name: str = "SixElements"
    constructor_args: Tuple[str, ...] = ("0x44F3747017Cc79a0D55914C20bf6666194359CD7",)
    display_name: str = "6 Elements"


DEFAULT_CONFIG = DeploymentConfig()


def configure_logging():
    """Route progress to stdout, errors to stderr, and everything to LOG_FILE"""
    logger.remove()
    logger.add(
        sys.stdout,
        format="{message}",
        level="INFO",
        filter=lambda record: record["level"].no < 40
    )
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level="ERROR",
        backtrace=False,
        diagnose=False
    )

    # Raises ValueError for unknown level names
    file_level = logger.level(os.getenv('LOG_LEVEL', 'DEBUG').upper()).name

    log_file = os.getenv('LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level=file_level
        )


def build_contract_manager() -> ContractManager:
    """Create a ContractManager from the environment"""
    w3 = RPCManager().get_web3()
    return ContractManager(w3, WalletManager())


async def run(
    config: DeploymentConfig = DEFAULT_CONFIG,
    contract_manager: Optional[ContractManager] = None
) -> DeployedContract:
    """
    Deploy the configured contract

    Args:
        config: Contract name and constructor arguments
        contract_manager: Manager to resolve the factory (None = from environment)

    Returns:
        Deployed contract handle
    """
    logger.info("deploy start")

    if contract_manager is None:
        contract_manager = build_contract_manager()

    factory = await contract_manager.get_contract_factory(config.contract_name)
    deployed = await factory.deploy(*config.constructor_args)

    logger.info(f"{config.display_name} address: {deployed.address}")
    return deployed


def main() -> int:
    """
    Run the deployment and map the outcome to an exit code

    Returns:
        0 on success, 1 on any failure
    """
    try:
        configure_logging()
        asyncio.run(run())
    except (Exception, KeyboardInterrupt) as e:
        logger.opt(exception=e).error(f"Deployment failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
