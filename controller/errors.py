"""
Dispatch errors

Raised synchronously by the Dispatcher before any state is changed.
"""


class DispatchError(Exception):
    """Base class for rejected calls"""


class FloorOutOfRangeError(DispatchError, ValueError):
    """Requested floor is outside [1, top_floor]"""

    def __init__(self, floor: int, top_floor: int):
        self.floor = floor
        self.top_floor = top_floor
        if floor < 1:
            message = f"Floor {floor} is below the bottom floor (1)"
        else:
            message = f"Floor {floor} exceeds the top floor ({top_floor})"
        super().__init__(message)


class InvalidDirectionError(DispatchError, ValueError):
    """Hall call direction is not UP or DOWN"""

    def __init__(self, direction):
        self.direction = direction
        super().__init__(f"Invalid hall call direction {direction!r}; use UP or DOWN")


class ElevatorNotFoundError(DispatchError, LookupError):
    """No elevator with the requested id"""

    def __init__(self, elevator_id: int):
        self.elevator_id = elevator_id
        super().__init__(f"Elevator id {elevator_id} not found")
