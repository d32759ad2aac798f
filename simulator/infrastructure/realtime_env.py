"""
RealtimeEnvironment

A custom SimPy environment that synchronizes simulation time with real time,
so front ends can watch and drive a running elevator bank.
"""

import logging
import threading
import time

import simpy

logger = logging.getLogger(__name__)


class RealtimeEnvironment(simpy.Environment):
    """
    Custom SimPy environment with real-time synchronization.

    Extends simpy.Environment to add real-time speed control.
    All timeout() calls are automatically synchronized with real time
    based on the speed_factor.

    SimPy itself is not thread-safe. Each step runs under `lock`; front-end
    threads must hold the same lock while they call into the simulation
    (for example to add an elevator, which starts a new process).

    Args:
        speed_factor (float): Speed multiplier for simulation
            - 1.0 = real-time (1 sim second = 1 real second)
            - 2.0 = double speed (1 sim second = 0.5 real seconds)
            - 0.0 = no delay (fastest possible, default SimPy behavior)

    Example:
        >>> env = RealtimeEnvironment(speed_factor=2.0)
        >>> with env.lock:
        ...     dispatcher.hall_call(3, "UP")
    """

    def __init__(self, speed_factor=1.0, initial_time=0):
        super().__init__(initial_time=initial_time)
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        self.speed_factor = speed_factor
        self.lock = threading.RLock()
        self.real_start_time = time.monotonic()
        self.sim_start_time = self.now

    def step(self):
        """
        Execute one simulation step and synchronize with real time.

        The lock is released before sleeping so front-end calls are only
        delayed by the step itself.
        """
        with self.lock:
            result = super().step()
            sim_elapsed = self.now - self.sim_start_time
            real_start_time = self.real_start_time
            speed_factor = self.speed_factor

        if speed_factor > 0:
            target_real_time = real_start_time + (sim_elapsed / speed_factor)
            sleep_time = target_real_time - time.monotonic()
            if sleep_time > 0:
                time.sleep(sleep_time)

        return result

    def set_speed(self, speed_factor):
        """
        Dynamically change simulation speed during runtime.

        Args:
            speed_factor (float): New speed multiplier (0.0 = no delay)
        """
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        with self.lock:
            # Reset timing references when changing speed
            self.speed_factor = speed_factor
            self.real_start_time = time.monotonic()
            self.sim_start_time = self.now
        logger.info("Simulation speed set to %.2fx", speed_factor)

    def get_speed(self):
        return self.speed_factor

    def start_background(self, name="simulation") -> threading.Thread:
        """
        Run the simulation forever on a daemon thread.

        The thread dies with the process; there is no graceful drain.
        """
        thread = threading.Thread(target=self.run, name=name, daemon=True)
        thread.start()
        return thread
