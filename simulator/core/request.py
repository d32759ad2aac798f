"""
Floor requests and direction-ordered request queues
"""

import heapq
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True, order=True)
class Request:
    """A request for an elevator to stop at a floor"""
    floor: int

    def __post_init__(self):
        if self.floor < 1:
            raise ValueError(f"Request floor must be at least 1, got {self.floor}")


class RequestQueue:
    """
    Priority queue of Requests keyed by floor

    An ascending queue yields the lowest floor first (used for upward travel),
    a descending queue yields the highest floor first (used for downward travel).
    Requests for the same floor are kept in insertion order.
    """

    def __init__(self, ascending: bool = True):
        self.ascending = ascending
        self._heap: List[Tuple[int, int, Request]] = []
        self._counter = 0

    def _key(self, request: Request) -> int:
        return request.floor if self.ascending else -request.floor

    def push(self, request: Request):
        heapq.heappush(self._heap, (self._key(request), self._counter, request))
        self._counter += 1

    def peek(self) -> Request:
        """
        Return the next request to service without removing it

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("peek from an empty RequestQueue")
        return self._heap[0][2]

    def pop(self) -> Request:
        if not self._heap:
            raise IndexError("pop from an empty RequestQueue")
        return heapq.heappop(self._heap)[2]

    def pop_floor(self, floor: int) -> List[Request]:
        """Remove every request at the head of the queue that targets `floor`"""
        served = []
        while self._heap and self._heap[0][2].floor == floor:
            served.append(heapq.heappop(self._heap)[2])
        return served

    def floors(self) -> List[int]:
        """Queued floors in service order"""
        return [request.floor for _, _, request in sorted(self._heap)]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        order = "ascending" if self.ascending else "descending"
        return f"RequestQueue({order}, floors={self.floors()})"
