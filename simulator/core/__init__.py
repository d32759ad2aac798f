"""Core simulation entities"""

from .entity import Entity
from .elevator import Elevator
from .request import Request, RequestQueue
from .status import Direction, ElevatorSnapshot, ElevatorStatus

__all__ = [
    'Entity',
    'Elevator',
    'Request',
    'RequestQueue',
    'Direction',
    'ElevatorSnapshot',
    'ElevatorStatus',
]
