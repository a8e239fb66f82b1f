"""
Handlers package exports.
"""
from .pool_handler import PoolHandler

__all__ = ["PoolHandler"]
