"""Front ends that drive a running elevator bank: interactive console and HTTP API"""

from .console import ElevatorConsole
from .http_server import create_app, run_server

__all__ = ['ElevatorConsole', 'create_app', 'run_server']
