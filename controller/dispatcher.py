import logging
from typing import List, Optional

import simpy

from config.dispatch import DispatchConfig
from config.simulation import SimulationConfig, TimingConfig
from simulator.core.elevator import Elevator
from simulator.core.status import Direction, ElevatorSnapshot
from .algorithms import create_strategy
from .algorithms.lowest_cost import LowestCostStrategy
from .errors import ElevatorNotFoundError, FloorOutOfRangeError, InvalidDirectionError
from .interfaces.allocation_strategy import IAllocationStrategy

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Dispatcher for a bank of elevators

    Owns the elevators of one building. Car calls go straight to the named
    elevator; hall calls are scored by the allocation strategy and routed to
    the cheapest elevator. Scoring reads one snapshot per elevator, so the
    view across elevators is best effort rather than globally atomic.

    This is a controller, not a simulated entity: it has no SimPy process of
    its own. Each elevator runs its own process in `env`.
    """

    def __init__(self, env: simpy.Environment, elevator_count: int, top_floor: int,
                 strategy: Optional[IAllocationStrategy] = None,
                 timing: Optional[TimingConfig] = None):
        if elevator_count < 1:
            raise ValueError("elevator_count must be at least 1")
        if top_floor < 1:
            raise ValueError("top_floor must be at least 1")

        self.env = env
        self.top_floor = top_floor
        self.strategy = strategy if strategy is not None else LowestCostStrategy()
        self.timing = timing if timing is not None else TimingConfig()
        self._elevators: List[Elevator] = []

        logger.info("%.2f [Dispatcher] Using strategy: %s", env.now, self.strategy.get_strategy_name())

        for _ in range(elevator_count):
            self.add_elevator()

    @classmethod
    def from_config(cls, env: simpy.Environment, sim_config: SimulationConfig,
                    dispatch_config: Optional[DispatchConfig] = None) -> 'Dispatcher':
        """Build a Dispatcher and its strategy from loaded configuration"""
        if dispatch_config is None:
            dispatch_config = DispatchConfig()
        strategy = create_strategy(
            dispatch_config.allocation_strategy.name,
            **dispatch_config.allocation_strategy.parameters
        )
        return cls(
            env,
            elevator_count=sim_config.elevator.num_elevators,
            top_floor=sim_config.building.top_floor,
            strategy=strategy,
            timing=sim_config.timing
        )

    @property
    def elevators(self) -> List[Elevator]:
        return list(self._elevators)

    def add_elevator(self) -> int:
        """
        Add an elevator to the bank

        Ids are 1-indexed and contiguous: the new id is the current count plus one.

        Returns:
            int: Id of the new elevator
        """
        elevator_id = len(self._elevators) + 1
        elevator = Elevator(
            self.env, elevator_id,
            tick_interval=self.timing.tick_interval,
            door_open_delay=self.timing.door_open_delay,
            door_hold_time=self.timing.door_hold_time,
            door_close_time=self.timing.door_close_time
        )
        self._elevators.append(elevator)
        logger.info("%.2f [Dispatcher] Elevator '%s' registered.", self.env.now, elevator.name)
        return elevator_id

    def get_elevator(self, elevator_id: int) -> Elevator:
        """
        Raises:
            ElevatorNotFoundError: If no elevator has this id
        """
        for elevator in self._elevators:
            if elevator.elevator_id == elevator_id:
                return elevator
        raise ElevatorNotFoundError(elevator_id)

    def _validate_floor(self, floor: int):
        if not 1 <= floor <= self.top_floor:
            raise FloorOutOfRangeError(floor, self.top_floor)

    def car_call(self, floor: int, elevator_id: int):
        """
        Request a stop from inside a specific elevator

        Bypasses the allocation strategy. Nothing is changed when the call is rejected.

        Raises:
            FloorOutOfRangeError: If floor is outside [1, top_floor]
            ElevatorNotFoundError: If no elevator has this id
        """
        try:
            self._validate_floor(floor)
            elevator = self.get_elevator(elevator_id)
        except (FloorOutOfRangeError, ElevatorNotFoundError) as e:
            logger.warning("%.2f [Dispatcher] Car call rejected: %s", self.env.now, e)
            raise

        logger.info("%.2f [Dispatcher] Car call: floor %d on %s", self.env.now, floor, elevator.name)
        elevator.add_request(floor)

    def hall_call(self, floor: int, direction) -> int:
        """
        Request an elevator from a floor

        Args:
            floor: Floor where the call is made
            direction: Direction.UP or Direction.DOWN (strings such as 'up' are accepted)

        Returns:
            int: Id of the elevator the call was assigned to

        Raises:
            FloorOutOfRangeError: If floor is outside [1, top_floor]
            InvalidDirectionError: If direction is not UP or DOWN
        """
        try:
            self._validate_floor(floor)
            direction = self._parse_hall_direction(direction)
        except (FloorOutOfRangeError, InvalidDirectionError) as e:
            logger.warning("%.2f [Dispatcher] Hall call rejected: %s", self.env.now, e)
            raise

        selected_id = self.strategy.select_elevator(floor, direction, self.snapshots())
        elevator = self.get_elevator(selected_id)
        elevator.add_request(floor)
        logger.info("%.2f [Dispatcher] Assigned hall call to %s: Floor %d %s",
                    self.env.now, elevator.name, floor, direction.value)
        return selected_id

    @staticmethod
    def _parse_hall_direction(direction) -> Direction:
        try:
            parsed = Direction.parse(direction)
        except ValueError:
            raise InvalidDirectionError(direction) from None
        if parsed == Direction.STATIONARY:
            raise InvalidDirectionError(direction)
        return parsed

    def set_elevator_operational(self, elevator_id: int, operational: bool):
        """Put an elevator in or out of service. Unknown ids are ignored."""
        for elevator in self._elevators:
            if elevator.elevator_id == elevator_id:
                elevator.set_operational(operational)
                return
        logger.debug("%.2f [Dispatcher] set_elevator_operational: no elevator %d, ignored",
                     self.env.now, elevator_id)

    def snapshots(self) -> List[ElevatorSnapshot]:
        """One snapshot per elevator, in id order"""
        return [elevator.snapshot() for elevator in self._elevators]

    def describe(self) -> str:
        """Status line for all elevators, e.g. 'E1: floor 1 IDLE | E2: floor 4 MOVING_UP'"""
        return " | ".join(snapshot.describe() for snapshot in self.snapshots())
