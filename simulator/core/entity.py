import logging
from abc import ABC, abstractmethod
from typing import Optional

import simpy

logger = logging.getLogger(__name__)


class Entity(ABC):
    """
    Abstract base class for entities in SimPy simulation.

    This class defines common attributes and behaviors for entities that operate
    as SimPy processes, providing a foundation for entity lifecycle management
    in the SimPy environment.
    """

    def __init__(self, env: simpy.Environment, name: Optional[str] = None):
        """
        Initialize the entity.

        Subclasses must set up every attribute used by run() before calling
        this constructor, because the process is started here.

        Args:
            env: The SimPy simulation environment this entity belongs to.
            name: Entity name. Optional. If not specified, derived from the class name.
        """
        self.env = env
        self.name: str = name if name is not None else self.__class__.__name__

        # Concrete classes set their own initial state
        self.state = None

        # SimPy process object corresponding to this entity
        self._process = self.env.process(self.run())

        logger.debug('%.2f: Entity "%s" (%s) created.', self.env.now, self.name, self.__class__.__name__)

    @abstractmethod
    def run(self):
        """
        Generator method that serves as the main SimPy process body for the entity.

        Typically structured as an infinite loop that dispatches on the current
        state and yields env.timeout() to advance simulation time.
        """
        pass

    def set_state(self, new_state):
        """
        Transition the entity's state.

        Args:
            new_state: Target state for transition.
        """
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._on_state_changed(old_state, new_state)

    def _on_state_changed(self, old_state, new_state):
        """Hook called after every state change. Logs the transition by default."""
        logger.info(
            '%.2f: [%s] state transition: %s -> %s',
            self.env.now, self.name, _state_label(old_state), _state_label(new_state)
        )

    @property
    def process(self) -> simpy.Process:
        """
        Get the SimPy process object for this entity.
        Can be used for operations like interrupting the process.
        """
        return self._process


def _state_label(state) -> str:
    return getattr(state, "value", str(state))
