#!/usr/bin/env python3
"""
Launcher for the elevator dispatch simulation

Runs the SimPy simulation in real time on a background thread and drives it
from the interactive console, or from the HTTP API with --http.
"""
import argparse
import logging
import sys

# Configuration
from config import (
    BuildingConfig,
    DispatchConfig,
    ElevatorConfig,
    SimulationConfig,
    load_dispatch_config,
    load_simulation_config,
)

from controller.dispatcher import Dispatcher
from simulator.infrastructure.realtime_env import RealtimeEnvironment
from visualizer.console import ElevatorConsole
from visualizer.http_server import run_server

logger = logging.getLogger(__name__)


def build_simulation(sim_config: SimulationConfig, dispatch_config: DispatchConfig):
    """
    Set up the environment and dispatcher described by the configuration

    Returns:
        (RealtimeEnvironment, Dispatcher)
    """
    env = RealtimeEnvironment(speed_factor=sim_config.realtime_factor)
    dispatcher = Dispatcher.from_config(env, sim_config, dispatch_config)
    return env, dispatcher


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Elevator bank dispatch simulation")
    parser.add_argument("--sim-config", help="Simulation configuration YAML file")
    parser.add_argument("--dispatch-config", help="Dispatch configuration YAML file")
    parser.add_argument("--floors", type=int, help="Top floor (overrides the configuration)")
    parser.add_argument("--elevators", type=int, help="Number of elevators (overrides the configuration)")
    parser.add_argument("--http", action="store_true", help="Serve the HTTP API instead of the console")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=5000)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        sim_config = load_simulation_config(args.sim_config) if args.sim_config else SimulationConfig.default()
        dispatch_config = load_dispatch_config(args.dispatch_config) if args.dispatch_config else DispatchConfig()
        if args.floors is not None:
            sim_config.building = BuildingConfig(top_floor=args.floors)
        if args.elevators is not None:
            sim_config.elevator = ElevatorConfig(num_elevators=args.elevators)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=sim_config.log_level.upper(),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        env, dispatcher = build_simulation(sim_config, dispatch_config)
    except (TypeError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    logger.info("Simulation: %d elevator(s), floors 1-%d, speed %.2fx",
                len(dispatcher.elevators), dispatcher.top_floor, sim_config.realtime_factor)
    env.start_background()

    try:
        if args.http:
            run_server(dispatcher, host=args.host, port=args.port, lock=env.lock)
        else:
            ElevatorConsole(dispatcher, lock=env.lock).run()
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user.")
    # Elevator loops run on a daemon thread and stop with the process
    return 0


if __name__ == '__main__':
    sys.exit(main())
