"""
Lowest Cost Strategy

Point-based elevator allocation: every elevator gets a cost for the hall call
and the cheapest one is selected.
"""

import logging
import math
from typing import Optional, Sequence

from simulator.core.status import Direction, ElevatorSnapshot
from ..interfaces.allocation_strategy import IAllocationStrategy

logger = logging.getLogger(__name__)

# Cost of an out-of-service elevator
UNREACHABLE_COST = math.inf


class LowestCostStrategy(IAllocationStrategy):
    """
    Lowest cost allocation strategy

    Cost Calculation (lower is better):
    - Out of service: UNREACHABLE_COST
    - Base: distance in floors between the car and the call
    - Stationary car: minus idle_bonus
    - Car already travelling in the call direction with the call ahead of it:
      minus en_route_bonus
    - Any other moving car: plus away_penalty
    - Plus one per request already queued on the car
    - Never below zero

    Ties go to the first elevator scanned. When every elevator is out of
    service the first one is still returned.
    """

    def __init__(self, idle_bonus: int = 2, en_route_bonus: int = 1, away_penalty: int = 3):
        self.idle_bonus = idle_bonus
        self.en_route_bonus = en_route_bonus
        self.away_penalty = away_penalty

    def calculate_cost(self, snapshot: ElevatorSnapshot, floor: int, direction: Direction) -> float:
        """
        Cost of sending one elevator to a hall call

        Args:
            snapshot: State of the candidate elevator
            floor: Hall call floor
            direction: Requested direction

        Returns:
            Non-negative cost, or UNREACHABLE_COST for an out-of-service car
        """
        if not snapshot.operational:
            return UNREACHABLE_COST

        cost = abs(snapshot.current_floor - floor)

        if snapshot.direction == Direction.STATIONARY:
            cost -= self.idle_bonus
        elif self._is_en_route(snapshot, floor, direction):
            cost -= self.en_route_bonus
        else:
            cost += self.away_penalty

        cost += snapshot.queued_request_count
        return max(cost, 0)

    @staticmethod
    def _is_en_route(snapshot: ElevatorSnapshot, floor: int, direction: Direction) -> bool:
        if snapshot.direction != direction:
            return False
        if direction == Direction.UP:
            return floor >= snapshot.current_floor
        if direction == Direction.DOWN:
            return floor <= snapshot.current_floor
        return False

    def select_elevator(
        self,
        floor: int,
        direction: Direction,
        snapshots: Sequence[ElevatorSnapshot]
    ) -> Optional[int]:
        best_elevator = None
        best_cost = UNREACHABLE_COST

        for snapshot in snapshots:
            cost = self.calculate_cost(snapshot, floor, direction)
            logger.debug(
                "[Dispatcher] E%d: floor=%d, direction=%s, queued=%d, operational=%s, cost=%s",
                snapshot.elevator_id, snapshot.current_floor, snapshot.direction.value,
                snapshot.queued_request_count, snapshot.operational, cost
            )
            if cost < best_cost:
                best_cost = cost
                best_elevator = snapshot.elevator_id

        # Fallback to first elevator if no valid selection
        if best_elevator is None and snapshots:
            best_elevator = snapshots[0].elevator_id
            logger.warning("[Dispatcher] No elevator in service; falling back to E%d", best_elevator)

        return best_elevator

    def get_strategy_name(self) -> str:
        """Return strategy name"""
        return "Lowest Cost (Distance, Direction and Load)"
