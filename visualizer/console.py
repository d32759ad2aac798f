"""
Interactive console for a running elevator bank

Commands:
    hall <floor> <up|down>      request an elevator from a floor
    car <elevatorId> <floor>    request a stop from inside an elevator
    add                         add an elevator to the bank
    service <elevatorId> <on|off>
    status                      print the status line once
    watch                       redraw continuously until 'q' + ENTER
    help
    exit
"""

import io
import logging
import select
import sys
from contextlib import nullcontext

from controller.dispatcher import Dispatcher
from controller.errors import DispatchError

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[2J"

HELP_TEXT = """
--- Available Commands ---
  watch                          - Enter continuous display mode (Exit with 'q' + ENTER).
  hall <floor> <up|down>         - Make a request from a floor.
                                   (e.g., 'hall 3 up')
  car <elevatorId> <floor>       - Make a request from inside an elevator.
                                   (e.g., 'car 1 5')
  add                            - Add an elevator to the bank.
  service <elevatorId> <on|off>  - Put an elevator in or out of service.
  status                         - Show the status of every elevator.
  help                           - Show this help menu.
  exit                           - Quit the simulation.
----------------------------"""


class ElevatorConsole:
    """
    Text front end for a Dispatcher

    Args:
        dispatcher: Dispatcher to drive
        lock: Lock held around every dispatcher call (RealtimeEnvironment.lock
            when the simulation runs on another thread)
        stdin, stdout: Streams, replaceable for tests
        clear_screen: Emit ANSI clear-screen codes before redraws
        watch_interval: Seconds between redraws in watch mode
    """

    def __init__(self, dispatcher: Dispatcher, lock=None, stdin=None, stdout=None,
                 clear_screen: bool = True, watch_interval: float = 0.5):
        self.dispatcher = dispatcher
        self.lock = lock if lock is not None else nullcontext()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear_screen = clear_screen
        self.watch_interval = watch_interval

        self._commands = {
            "hall": self._cmd_hall,
            "car": self._cmd_car,
            "add": self._cmd_add,
            "service": self._cmd_service,
            "status": self._cmd_status,
            "watch": self._cmd_watch,
            "help": self._cmd_help,
        }

    def _write(self, text: str = ""):
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _redraw(self, title: str, footer: str):
        if self.clear_screen:
            self.stdout.write(CLEAR_SCREEN)
        self._write(f"--- {title} ---")
        with self.lock:
            self._write(self.dispatcher.describe())
        self._write("-" * 36)
        self._write(footer)

    def run(self):
        """Prompt loop. Returns on 'exit' or end of input."""
        self._write("Elevator Simulation\n")
        while True:
            self._redraw("ELEVATOR STATUS",
                         "Type 'watch' for continuous updates, 'help' for commands, or 'exit' to quit.")
            self.stdout.write("> ")
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                break
            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """
        Run one command line.

        Returns:
            False when the console should exit, True otherwise
        """
        parts = line.strip().lower().split()
        if not parts:
            return True

        command, args = parts[0], parts[1:]
        if command == "exit":
            return False

        handler = self._commands.get(command)
        if handler is None:
            self._write("Unknown command. Type 'help' for a list of commands.")
            return True

        try:
            handler(args)
        except DispatchError as e:
            logger.debug("Console command %r rejected: %s", line.strip(), e)
            self._write(f"Error: {e}")
        except ValueError:
            self._write("Invalid number in command.")
        except IndexError:
            self._write("Missing arguments for command.")
        return True

    def _cmd_hall(self, args):
        floor = int(args[0])
        direction = args[1]
        if direction not in ("up", "down"):
            self._write("Invalid direction. Use 'up' or 'down'.")
            return
        with self.lock:
            elevator_id = self.dispatcher.hall_call(floor, direction)
        self._write(f"Hall call at floor {floor} ({direction}) assigned to elevator {elevator_id}.")

    def _cmd_car(self, args):
        elevator_id = int(args[0])
        floor = int(args[1])
        with self.lock:
            self.dispatcher.car_call(floor, elevator_id)
        self._write(f"Elevator {elevator_id} will stop at floor {floor}.")

    def _cmd_add(self, args):
        with self.lock:
            elevator_id = self.dispatcher.add_elevator()
        self._write(f"Added elevator {elevator_id}.")

    def _cmd_service(self, args):
        elevator_id = int(args[0])
        state = args[1]
        if state not in ("on", "off"):
            self._write("Invalid service state. Use 'on' or 'off'.")
            return
        with self.lock:
            self.dispatcher.set_elevator_operational(elevator_id, state == "on")
        self._write(f"Elevator {elevator_id} service {state}.")

    def _cmd_status(self, args):
        with self.lock:
            self._write(self.dispatcher.describe())

    def _cmd_help(self, args):
        self._write(HELP_TEXT)

    def _cmd_watch(self, args):
        while True:
            self._redraw("WATCH MODE", "Press 'q' followed by ENTER to exit...")
            if self._quit_requested():
                return

    def _quit_requested(self) -> bool:
        """Wait up to watch_interval for a line on stdin; True if it asks to leave watch mode."""
        try:
            ready, _, _ = select.select([self.stdin], [], [], self.watch_interval)
        except (io.UnsupportedOperation, ValueError, TypeError, OSError):
            # Not a selectable stream (e.g. StringIO): read the next line directly
            ready = [self.stdin]

        if not ready:
            return False
        line = self.stdin.readline()
        # End of input also leaves watch mode
        return not line or line.strip().lower() == "q"
