"""
Blockchain Interaction Package
Handles artifact resolution, signing, and contract deployment
"""

from .contract_manager import ContractManager
from .contract_factory import ContractFactory, DeployedContract
from .wallet_manager import WalletManager
from .exceptions import ContractDeployerError, ResolutionError, DeploymentError

__all__ = [
    'ContractManager',
    'ContractFactory',
    'DeployedContract',
    'WalletManager',
    'ContractDeployerError',
    'ResolutionError',
    'DeploymentError'
]
