from pathlib import Path

import pytest
import yaml

from config import (
    BuildingConfig,
    ConfigLoader,
    DispatchConfig,
    ElevatorConfig,
    SimulationConfig,
    TimingConfig,
    load_dispatch_config,
    load_simulation_config,
    save_simulation_config,
)


def test_defaults():
    config = SimulationConfig.default()
    assert config.building.top_floor == 5
    assert config.elevator.num_elevators == 2
    assert config.timing == TimingConfig(tick_interval=1.0, door_open_delay=1.0,
                                         door_hold_time=4.0, door_close_time=1.0)
    assert DispatchConfig().allocation_strategy.name == "LowestCost"


def test_load_simulation_config(tmp_path):
    path = tmp_path / "sim.yaml"
    path.write_text(yaml.dump({
        "simulation": {
            "building": {"top_floor": 12},
            "elevator": {"num_elevators": 3},
            "timing": {"door_hold_time": 2.5},
            "realtime_factor": 0.0,
            "log_level": "info",
        }
    }))

    config = load_simulation_config(path)

    assert config.building.top_floor == 12
    assert config.elevator.num_elevators == 3
    assert config.timing.door_hold_time == 2.5
    assert config.timing.tick_interval == 1.0
    assert config.realtime_factor == 0.0


def test_load_dispatch_config(tmp_path):
    path = tmp_path / "dispatch.yaml"
    path.write_text(
        "dispatch:\n"
        "  allocation_strategy:\n"
        "    name: LowestCost\n"
        "    parameters:\n"
        "      away_penalty: 5\n"
    )

    config = load_dispatch_config(path)

    assert config.allocation_strategy.parameters == {"away_penalty": 5}


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert ConfigLoader.load_simulation(path).building.top_floor == 5


def test_saved_config_loads_back(tmp_path):
    config = SimulationConfig(building=BuildingConfig(top_floor=8), elevator=ElevatorConfig(num_elevators=4),
                              timing=TimingConfig(tick_interval=0.5))
    path = tmp_path / "nested" / "sim.yaml"

    save_simulation_config(config, path)

    assert load_simulation_config(path) == config


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_simulation_config(tmp_path / "nope.yaml")


def test_non_mapping_file(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_dispatch_config(path)


@pytest.mark.parametrize("factory", [
    lambda: BuildingConfig(top_floor=0),
    lambda: ElevatorConfig(num_elevators=0),
    lambda: TimingConfig(tick_interval=0),
    lambda: TimingConfig(door_hold_time=-1),
    lambda: SimulationConfig(BuildingConfig(), ElevatorConfig(), TimingConfig(), realtime_factor=-1),
    lambda: SimulationConfig(BuildingConfig(), ElevatorConfig(), TimingConfig(), log_level="LOUD"),
])
def test_invalid_values_rejected(factory):
    with pytest.raises(ValueError):
        factory()


@pytest.mark.parametrize("name", ["default.yaml", "office_tower.yaml"])
def test_bundled_simulation_scenarios_load(name):
    path = Path(__file__).parents[2] / "scenarios" / "simulation" / name
    config = load_simulation_config(path)
    assert config.elevator.num_elevators >= 1


def test_bundled_dispatch_scenario_loads():
    path = Path(__file__).parents[2] / "scenarios" / "dispatch" / "lowest_cost.yaml"
    assert load_dispatch_config(path).allocation_strategy.name == "LowestCost"
