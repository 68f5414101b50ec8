"""
Utilities Package
Network connection helpers
"""

from .rpc_manager import RPCManager

__all__ = ['RPCManager']
