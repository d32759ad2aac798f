"""
Elevator status values

Status and direction enumerations shared by the elevator state machine and
the dispatcher, plus the read-only snapshot handed to allocation strategies.
"""

from dataclasses import dataclass
from enum import Enum


class ElevatorStatus(Enum):
    """States of the elevator state machine"""
    IDLE = "IDLE"
    MOVING_UP = "MOVING_UP"
    MOVING_DOWN = "MOVING_DOWN"
    OPENING_DOORS = "OPENING_DOORS"
    CLOSING_DOORS = "CLOSING_DOORS"


class Direction(Enum):
    """Travel direction of an elevator, or the requested direction of a hall call"""
    UP = "UP"
    DOWN = "DOWN"
    STATIONARY = "STATIONARY"

    @classmethod
    def parse(cls, value) -> "Direction":
        """
        Convert user input ('up', 'DOWN', Direction.UP) into a Direction

        Raises:
            ValueError: If the value names no direction
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown direction: {value!r}") from None


# Door phases report STATIONARY: the car is not travelling while doors operate
STATUS_TO_DIRECTION = {
    ElevatorStatus.IDLE: Direction.STATIONARY,
    ElevatorStatus.MOVING_UP: Direction.UP,
    ElevatorStatus.MOVING_DOWN: Direction.DOWN,
    ElevatorStatus.OPENING_DOORS: Direction.STATIONARY,
    ElevatorStatus.CLOSING_DOORS: Direction.STATIONARY,
}


@dataclass(frozen=True)
class ElevatorSnapshot:
    """Consistent view of one elevator, taken under that elevator's lock."""

    elevator_id: int
    current_floor: int
    status: ElevatorStatus
    direction: Direction
    operational: bool
    queued_request_count: int

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary"""
        return {
            "elevator_id": self.elevator_id,
            "current_floor": self.current_floor,
            "status": self.status.value,
            "direction": self.direction.value,
            "operational": self.operational,
            "queued_request_count": self.queued_request_count,
        }

    def describe(self) -> str:
        """Short status line used by the console, e.g. 'E1: floor 3 MOVING_UP'"""
        label = f"E{self.elevator_id}: floor {self.current_floor} {self.status.value}"
        if not self.operational:
            label += " (out of service)"
        return label
