import time

import pytest

from controller.dispatcher import Dispatcher
from simulator.infrastructure.realtime_env import RealtimeEnvironment


def test_zero_speed_runs_like_plain_simpy():
    env = RealtimeEnvironment(speed_factor=0.0)
    dispatcher = Dispatcher(env, elevator_count=1, top_floor=5)
    dispatcher.car_call(3, 1)

    env.run(until=2.5)

    assert dispatcher.get_elevator(1).current_floor == 3


def test_negative_speed_rejected():
    with pytest.raises(ValueError):
        RealtimeEnvironment(speed_factor=-1)
    env = RealtimeEnvironment()
    with pytest.raises(ValueError):
        env.set_speed(-0.5)


def test_set_speed():
    env = RealtimeEnvironment(speed_factor=1.0)
    env.set_speed(4.0)
    assert env.get_speed() == 4.0


def test_background_thread_accepts_calls_under_lock():
    env = RealtimeEnvironment(speed_factor=200.0)
    dispatcher = Dispatcher(env, elevator_count=2, top_floor=5)
    thread = env.start_background()

    with env.lock:
        dispatcher.car_call(3, 1)
        new_id = dispatcher.add_elevator()
        dispatcher.car_call(2, new_id)

    deadline = time.monotonic() + 5.0
    while time.monotonic() < deadline:
        if dispatcher.get_elevator(1).current_floor == 3 and dispatcher.get_elevator(new_id).current_floor == 2:
            break
        time.sleep(0.01)

    assert thread.is_alive()
    assert dispatcher.get_elevator(1).current_floor == 3
    assert dispatcher.get_elevator(new_id).current_floor == 2
