import sys
from pathlib import Path

import pytest
import simpy

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from controller.dispatcher import Dispatcher  # noqa: E402


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def dispatcher(env):
    """Two elevators idle at floor 1, floors 1-5, default timing"""
    return Dispatcher(env, elevator_count=2, top_floor=5)
