"""
Elevator Simulator - Core simulation engine

This package provides the elevator entity, its request queues and the
SimPy environments the elevators run in.
"""

__version__ = "0.1.0"

from .core.elevator import Elevator
from .core.entity import Entity
from .core.request import Request, RequestQueue
from .core.status import Direction, ElevatorSnapshot, ElevatorStatus

from .infrastructure.realtime_env import RealtimeEnvironment

__all__ = [
    'Elevator',
    'Entity',
    'Request',
    'RequestQueue',
    'Direction',
    'ElevatorSnapshot',
    'ElevatorStatus',
    'RealtimeEnvironment',
]
