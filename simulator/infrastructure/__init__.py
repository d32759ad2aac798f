"""Infrastructure components for simulation"""

from .realtime_env import RealtimeEnvironment

__all__ = [
    'RealtimeEnvironment',
]
