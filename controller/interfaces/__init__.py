"""Strategy interfaces used by the dispatcher"""

from .allocation_strategy import IAllocationStrategy

__all__ = ['IAllocationStrategy']
