"""
Configuration management package

Provides configuration classes for both dispatching and simulation.
"""

from .dispatch import (
    DispatchConfig,
    AllocationStrategyConfig
)

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    ElevatorConfig,
    TimingConfig
)

from .config_loader import (
    ConfigLoader,
    load_dispatch_config,
    load_simulation_config,
    save_dispatch_config,
    save_simulation_config
)

__all__ = [
    # Dispatch
    'DispatchConfig',
    'AllocationStrategyConfig',

    # Simulation
    'SimulationConfig',
    'BuildingConfig',
    'ElevatorConfig',
    'TimingConfig',

    # Loader
    'ConfigLoader',
    'load_dispatch_config',
    'load_simulation_config',
    'save_dispatch_config',
    'save_simulation_config',
]
