import pytest

from controller.algorithms import STRATEGY_REGISTRY, UNREACHABLE_COST, create_strategy
from controller.algorithms.lowest_cost import LowestCostStrategy
from simulator.core.status import STATUS_TO_DIRECTION, Direction, ElevatorSnapshot, ElevatorStatus


def snap(elevator_id, floor, status=ElevatorStatus.IDLE, queued=0, operational=True):
    return ElevatorSnapshot(
        elevator_id=elevator_id,
        current_floor=floor,
        status=status,
        direction=STATUS_TO_DIRECTION[status],
        operational=operational,
        queued_request_count=queued,
    )


@pytest.fixture
def strategy():
    return LowestCostStrategy()


@pytest.mark.parametrize("snapshot, floor, direction, expected", [
    # Stationary cars get the idle bonus
    (snap(1, 1), 5, Direction.UP, 2),
    (snap(1, 1), 3, Direction.DOWN, 0),
    (snap(1, 2, ElevatorStatus.OPENING_DOORS), 4, Direction.UP, 0),
    # Already heading towards the call in the same direction
    (snap(1, 3, ElevatorStatus.MOVING_UP), 5, Direction.UP, 1),
    (snap(1, 4, ElevatorStatus.MOVING_DOWN), 2, Direction.DOWN, 1),
    (snap(1, 3, ElevatorStatus.MOVING_UP), 3, Direction.UP, 0),
    # Moving away from the call, or against the requested direction
    (snap(1, 3, ElevatorStatus.MOVING_UP), 2, Direction.UP, 4),
    (snap(1, 3, ElevatorStatus.MOVING_UP), 5, Direction.DOWN, 5),
    (snap(1, 2, ElevatorStatus.MOVING_DOWN), 4, Direction.DOWN, 5),
    # Load penalty
    (snap(1, 1, queued=3), 5, Direction.UP, 5),
])
def test_calculate_cost(strategy, snapshot, floor, direction, expected):
    assert strategy.calculate_cost(snapshot, floor, direction) == expected


def test_cost_is_never_negative(strategy):
    assert strategy.calculate_cost(snap(1, 3), 3, Direction.UP) == 0


def test_out_of_service_cost_is_unreachable(strategy):
    cost = strategy.calculate_cost(snap(1, 3, operational=False), 3, Direction.UP)
    assert cost == UNREACHABLE_COST


def test_prefers_elevator_already_heading_to_call(strategy):
    snapshots = [snap(1, 1), snap(2, 3, ElevatorStatus.MOVING_UP)]
    # Idle car: 4 - 2 = 2, moving car: 2 - 1 = 1
    assert strategy.select_elevator(5, Direction.UP, snapshots) == 2


def test_ties_go_to_first_elevator_scanned(strategy):
    snapshots = [snap(1, 1), snap(2, 1), snap(3, 1)]
    assert strategy.select_elevator(3, Direction.UP, snapshots) == 1


def test_out_of_service_elevator_is_skipped(strategy):
    snapshots = [snap(1, 3, operational=False), snap(2, 1, ElevatorStatus.MOVING_DOWN, queued=4)]
    assert strategy.select_elevator(3, Direction.UP, snapshots) == 2


def test_all_out_of_service_falls_back_to_first(strategy, caplog):
    snapshots = [snap(4, 1, operational=False), snap(5, 2, operational=False)]
    assert strategy.select_elevator(3, Direction.UP, snapshots) == 4
    assert any("No elevator in service" in r.getMessage() for r in caplog.records)


def test_no_elevators_selects_nothing(strategy):
    assert strategy.select_elevator(3, Direction.UP, []) is None


def test_custom_weights():
    strategy = LowestCostStrategy(idle_bonus=0, en_route_bonus=0, away_penalty=10)
    assert strategy.calculate_cost(snap(1, 1), 4, Direction.UP) == 3
    assert strategy.calculate_cost(snap(1, 1, ElevatorStatus.MOVING_DOWN), 4, Direction.UP) == 13


def test_create_strategy_from_registry():
    strategy = create_strategy("LowestCost", away_penalty=6)
    assert isinstance(strategy, LowestCostStrategy)
    assert strategy.away_penalty == 6
    assert "LowestCost" in STRATEGY_REGISTRY


def test_create_unknown_strategy():
    with pytest.raises(ValueError, match="Unknown allocation strategy"):
        create_strategy("NearestCar")
