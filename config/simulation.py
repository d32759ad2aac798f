"""
Simulation Configuration

Building size, elevator count and the simulated timing of the elevator
state machine.
"""

from dataclasses import dataclass
import logging


@dataclass
class BuildingConfig:
    """Building specifications (the bottom floor is always 1)"""
    top_floor: int = 5

    def __post_init__(self):
        if self.top_floor < 1:
            raise ValueError("top_floor must be at least 1")


@dataclass
class ElevatorConfig:
    """Elevator bank specifications"""
    num_elevators: int = 2

    def __post_init__(self):
        if self.num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")


@dataclass
class TimingConfig:
    """Simulated durations, in simulation time units"""
    tick_interval: float = 1.0  # one floor per tick
    door_open_delay: float = 1.0  # arrival until doors start opening
    door_hold_time: float = 4.0  # doors open for passenger transfer
    door_close_time: float = 1.0

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        if self.door_open_delay < 0:
            raise ValueError("door_open_delay cannot be negative")
        if self.door_hold_time < 0:
            raise ValueError("door_hold_time cannot be negative")
        if self.door_close_time < 0:
            raise ValueError("door_close_time cannot be negative")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, elevator and timing settings with the run controls
    used by the front ends.
    """
    building: BuildingConfig
    elevator: ElevatorConfig
    timing: TimingConfig

    # Simulation control
    realtime_factor: float = 1.0  # 1.0 = realtime, 0.0 = as fast as possible
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")

    @classmethod
    def default(cls) -> 'SimulationConfig':
        return cls(building=BuildingConfig(), elevator=ElevatorConfig(), timing=TimingConfig())

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data)

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            top_floor=building_data.get('top_floor', 5)
        )

        elevator_data = sim_data.get('elevator', {})
        elevator = ElevatorConfig(
            num_elevators=elevator_data.get('num_elevators', 2)
        )

        timing_data = sim_data.get('timing', {})
        timing = TimingConfig(
            tick_interval=timing_data.get('tick_interval', 1.0),
            door_open_delay=timing_data.get('door_open_delay', 1.0),
            door_hold_time=timing_data.get('door_hold_time', 4.0),
            door_close_time=timing_data.get('door_close_time', 1.0)
        )

        return cls(
            building=building,
            elevator=elevator,
            timing=timing,
            realtime_factor=sim_data.get('realtime_factor', 1.0),
            log_level=sim_data.get('log_level', 'WARNING')
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'simulation': {
                'building': {
                    'top_floor': self.building.top_floor
                },
                'elevator': {
                    'num_elevators': self.elevator.num_elevators
                },
                'timing': {
                    'tick_interval': self.timing.tick_interval,
                    'door_open_delay': self.timing.door_open_delay,
                    'door_hold_time': self.timing.door_hold_time,
                    'door_close_time': self.timing.door_close_time
                },
                'realtime_factor': self.realtime_factor,
                'log_level': self.log_level
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        door_cycle = self.timing.door_open_delay + self.timing.door_hold_time + self.timing.door_close_time
        if door_cycle <= 0:
            raise ValueError("door cycle duration must be positive")
