"""
Deployment Exceptions
Errors raised while resolving and deploying contracts
"""

from typing import Optional


class ContractDeployerError(Exception):
    """Base exception for contract deployment errors."""

    pass


class ResolutionError(ContractDeployerError):
    """Raised when a contract factory or its network cannot be resolved."""

    pass


class DeploymentError(ContractDeployerError):
    """Raised when a deployment transaction fails to be sent or confirmed."""

    def __init__(self, message: str, transaction_hash: Optional[str] = None):
        super().__init__(message)
        self.transaction_hash = transaction_hash
