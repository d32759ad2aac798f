"""
Elevator Dispatch Controller

This package routes car calls and hall calls to the elevators of a bank.
"""

__version__ = "0.1.0"

from .dispatcher import Dispatcher
from .errors import DispatchError, ElevatorNotFoundError, FloorOutOfRangeError, InvalidDirectionError

__all__ = [
    'Dispatcher',
    'DispatchError',
    'ElevatorNotFoundError',
    'FloorOutOfRangeError',
    'InvalidDirectionError',
]
