import logging
import threading
from typing import Dict, List

import simpy
from simpy.events import Interrupt

from .entity import Entity
from .request import Request, RequestQueue
from .status import STATUS_TO_DIRECTION, Direction, ElevatorSnapshot, ElevatorStatus

logger = logging.getLogger(__name__)


class Elevator(Entity):
    """
    Single elevator car driven by its own SimPy process

    Requests above the car go to the up queue (lowest floor first), requests
    below it go to the down queue (highest floor first). Every tick the state
    machine advances the car one floor towards the head of the queue for its
    current direction, and runs a door cycle on arrival.

    State is guarded by a per-elevator lock so that dispatcher and front-end
    threads can add requests and read state while the simulation runs. The
    lock is never held across a simulated wait.
    """

    def __init__(self, env: simpy.Environment, elevator_id: int, tick_interval: float = 1.0,
                 door_open_delay: float = 1.0, door_hold_time: float = 4.0,
                 door_close_time: float = 1.0, start_floor: int = 1):
        if start_floor < 1:
            raise ValueError(f"start_floor must be at least 1, got {start_floor}")
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")

        self.elevator_id = elevator_id
        self.tick_interval = tick_interval
        self.door_open_delay = door_open_delay
        self.door_hold_time = door_hold_time
        self.door_close_time = door_close_time

        self._lock = threading.RLock()
        self._current_floor = start_floor
        self._operational = True
        self.up_queue = RequestQueue(ascending=True)
        self.down_queue = RequestQueue(ascending=False)
        # Number of door cycles requested for the current floor, not yet run
        self._pending_door_cycles = 0
        # Succeeded to cut the current tick wait short; None outside tick waits
        self._wakeup = None

        self._handlers = {
            ElevatorStatus.IDLE: self._on_idle,
            ElevatorStatus.MOVING_UP: self._on_moving_up,
            ElevatorStatus.MOVING_DOWN: self._on_moving_down,
            ElevatorStatus.OPENING_DOORS: self._on_door_phase,
            ElevatorStatus.CLOSING_DOORS: self._on_door_phase,
        }

        super().__init__(env, f"Elevator_{elevator_id}")
        self.set_state(ElevatorStatus.IDLE)

    # --- Simulation process ---

    def run(self):
        logger.info("%.2f: [%s] Operational at floor %d.", self.env.now, self.name, self._current_floor)
        while True:
            if self._evaluate():
                yield from self._door_cycle()

            wakeup = self.env.event()
            with self._lock:
                self._wakeup = wakeup
            yield from self._wait(self.tick_interval, wakeup)
            with self._lock:
                self._wakeup = None

    def _evaluate(self) -> bool:
        """
        Run one tick of the state machine.

        Returns:
            True if the car must now run a door cycle at its current floor.
        """
        with self._lock:
            if self._pending_door_cycles:
                self._pending_door_cycles -= 1
                return True
            return self._handlers[self.state]()

    def _on_idle(self) -> bool:
        if self.up_queue:
            self.set_state(ElevatorStatus.MOVING_UP)
        elif self.down_queue:
            self.set_state(ElevatorStatus.MOVING_DOWN)
        return False

    def _on_moving_up(self) -> bool:
        return self._advance(self.up_queue, self.down_queue, ElevatorStatus.MOVING_DOWN)

    def _on_moving_down(self) -> bool:
        return self._advance(self.down_queue, self.up_queue, ElevatorStatus.MOVING_UP)

    def _on_door_phase(self) -> bool:
        # Door phases run inside _door_cycle; nothing to do on a regular tick
        return False

    def _advance(self, queue: RequestQueue, opposite: RequestQueue, reverse_status: ElevatorStatus) -> bool:
        """Move one floor towards the head of `queue`, serving it on arrival."""
        if not queue:
            self.set_state(reverse_status if opposite else ElevatorStatus.IDLE)
            return False

        target = queue.peek().floor
        if self._current_floor != target:
            self._current_floor += 1 if target > self._current_floor else -1
            logger.debug("%.2f: [%s] Passing floor %d (target %d)", self.env.now, self.name,
                         self._current_floor, target)
        if self._current_floor != target:
            return False

        # Duplicate stops for this floor are all served by one door cycle
        served = queue.pop_floor(target)
        logger.info("%.2f: [%s] Arrived at floor %d (%d request(s) served)", self.env.now, self.name,
                    target, len(served))

        # Reverse only once the current direction has nothing left; the
        # opposite queue is picked up on the next tick
        if not queue and opposite:
            self.set_state(reverse_status)
        return True

    def _door_cycle(self):
        """Open, hold and close the doors, then restore the previous status."""
        with self._lock:
            prior_status = self.state
            floor = self._current_floor

        yield from self._wait(self.door_open_delay)
        with self._lock:
            self.set_state(ElevatorStatus.OPENING_DOORS)
        logger.info("%.2f: [%s] Opening doors at floor %d", self.env.now, self.name, floor)

        yield from self._wait(self.door_hold_time)
        with self._lock:
            self.set_state(ElevatorStatus.CLOSING_DOORS)
        logger.info("%.2f: [%s] Closing doors at floor %d", self.env.now, self.name, floor)

        yield from self._wait(self.door_close_time)
        with self._lock:
            self.set_state(prior_status)

    def _wait(self, delay: float, wakeup: simpy.Event = None):
        """Timeout that logs and absorbs an interrupt instead of ending the process."""
        event = self.env.timeout(delay)
        if wakeup is not None:
            event = event | wakeup
        try:
            yield event
        except Interrupt as interrupt:
            logger.warning("%.2f: [%s] Wait interrupted (%s); resuming on next tick",
                           self.env.now, self.name, interrupt.cause)

    # --- Requests ---

    def add_request(self, floor: int):
        """
        Accept a stop request.

        A floor above the car joins the up queue, a floor below it joins the
        down queue. A request for the current floor is not queued: the car
        wakes from its tick wait and starts a door cycle at once. If a door
        cycle is already running, another one follows it.

        Callers on other threads must hold the environment lock
        (RealtimeEnvironment.lock), since waking the car schedules a SimPy event.

        Args:
            floor: Target floor (range validation is the dispatcher's job)
        """
        request = Request(floor)
        with self._lock:
            if floor > self._current_floor:
                self.up_queue.push(request)
                queue_name = "up"
            elif floor < self._current_floor:
                self.down_queue.push(request)
                queue_name = "down"
            else:
                self._pending_door_cycles += 1
                if self._wakeup is not None and not self._wakeup.triggered:
                    self._wakeup.succeed()
                queue_name = None

        if queue_name is None:
            logger.info("%.2f: [%s] Request for current floor %d: door cycle scheduled",
                        self.env.now, self.name, floor)
        else:
            logger.info("%.2f: [%s] Request for floor %d added to %s queue",
                        self.env.now, self.name, floor, queue_name)

    def set_operational(self, operational: bool):
        """Mark the car available or unavailable for new hall calls. Queued requests are kept."""
        with self._lock:
            changed = self._operational != operational
            self._operational = operational
        if changed:
            logger.info("%.2f: [%s] %s", self.env.now, self.name,
                        "Back in service" if operational else "Out of service")

    # --- Read accessors ---

    @property
    def current_floor(self) -> int:
        with self._lock:
            return self._current_floor

    @property
    def status(self) -> ElevatorStatus:
        with self._lock:
            return self.state

    @property
    def operational(self) -> bool:
        with self._lock:
            return self._operational

    @property
    def direction(self) -> Direction:
        with self._lock:
            return STATUS_TO_DIRECTION[self.state]

    @property
    def queued_request_count(self) -> int:
        with self._lock:
            return len(self.up_queue) + len(self.down_queue)

    def pending_floors(self) -> Dict[str, List[int]]:
        """Queued floors per direction, in service order"""
        with self._lock:
            return {"up": self.up_queue.floors(), "down": self.down_queue.floors()}

    def snapshot(self) -> ElevatorSnapshot:
        with self._lock:
            return ElevatorSnapshot(
                elevator_id=self.elevator_id,
                current_floor=self._current_floor,
                status=self.state,
                direction=STATUS_TO_DIRECTION[self.state],
                operational=self._operational,
                queued_request_count=len(self.up_queue) + len(self.down_queue),
            )

    def __str__(self) -> str:
        return self.snapshot().describe()
