"""
Allocation Strategy Interface

Defines how elevators are selected for hall calls.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from simulator.core.status import Direction, ElevatorSnapshot


class IAllocationStrategy(ABC):
    """
    Interface for elevator allocation strategies

    Defines how to select the best elevator for a given hall call. Strategies
    only see snapshots, so they never touch elevator state directly.
    """

    @abstractmethod
    def select_elevator(
        self,
        floor: int,
        direction: Direction,
        snapshots: Sequence[ElevatorSnapshot]
    ) -> Optional[int]:
        """
        Select the best elevator for a hall call

        Args:
            floor: Floor where the hall call was made
            direction: Requested travel direction (UP or DOWN)
            snapshots: Current state of every elevator, in dispatcher order

        Returns:
            int: Id of the selected elevator, or None if `snapshots` is empty
        """
        pass

    @abstractmethod
    def get_strategy_name(self) -> str:
        """
        Get the name of this strategy

        Returns:
            str: Strategy name (for logging and debugging)
        """
        pass
