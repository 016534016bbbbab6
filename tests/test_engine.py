import pytest

from starforge.components import Transform, Velocity
from starforge.engine import GameEngine
from starforge.errors import AssetNotFound, InvalidComponent


def make_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_initial_delta_time_is_zero():
    engine = GameEngine(clock=make_clock([1.0]))
    assert engine.delta_time == 0.0


def test_delta_time_measures_time_between_runs():
    engine = GameEngine(clock=make_clock([10.0, 10.5, 11.25]))
    engine.run_systems()
    assert engine.delta_time == pytest.approx(0.5)
    engine.run_systems()
    assert engine.delta_time == pytest.approx(0.75)


def test_systems_see_previous_frame_delta():
    engine = GameEngine(clock=make_clock([0.0, 2.0, 3.0]))
    seen = []
    engine.add_system(lambda ge: seen.append(ge.delta_time))
    engine.run_systems()
    engine.run_systems()
    assert seen == [0.0, pytest.approx(2.0)]


def test_system_receives_engine_and_component_arrays():
    engine = GameEngine(clock=make_clock([0.0, 1.0]))
    engine.register_component(Transform)
    engine.register_component(Velocity)
    entity = engine.spawn_entity()
    engine.add_component(entity, Transform(pos_x=1.0))
    engine.add_component(entity, Velocity(vel_x=2.0))

    def move(ge, transforms, velocities, factor):
        assert ge is engine
        for index, vel in velocities:
            transforms[index].pos_x += vel.vel_x * factor

    engine.add_system(move, Transform, Velocity, 3.0)
    engine.run_systems()
    assert engine.get_components(Transform)[entity].pos_x == pytest.approx(7.0)


def test_system_removal_stops_it_running():
    engine = GameEngine(clock=make_clock([0.0, 1.0, 2.0]))
    calls = []
    remove = engine.add_system(lambda ge: calls.append(1))
    engine.run_systems()
    remove()
    engine.run_systems()
    assert calls == [1]


def test_clear_systems_removes_all():
    engine = GameEngine(clock=make_clock([0.0, 1.0]))
    calls = []
    engine.add_system(lambda ge: calls.append("a"))
    engine.add_system(lambda ge: calls.append("b"))
    engine.clear_systems()
    engine.run_systems()
    assert calls == []


def test_systems_run_in_insertion_order():
    engine = GameEngine(clock=make_clock([0.0, 1.0]))
    calls = []
    engine.add_system(lambda ge: calls.append("first"))
    engine.add_system(lambda ge: calls.append("second"))
    engine.run_systems()
    assert calls == ["first", "second"]


def test_engine_is_also_an_asset_manager():
    engine = GameEngine(clock=make_clock([0.0]))
    engine.add_asset("font", "arial")
    assert engine.get_asset("font", str) == "arial"
    assert engine.remove_asset("font", str) == "arial"
    with pytest.raises(AssetNotFound):
        engine.get_asset("font", str)


def test_unregistered_component_raises():
    engine = GameEngine(clock=make_clock([0.0]))
    with pytest.raises(InvalidComponent):
        engine.get_components(Transform)


def test_run_single_system_returns_result():
    engine = GameEngine(clock=make_clock([0.0]))
    engine.register_component(Velocity)
    entity = engine.spawn_entity()
    engine.add_component(entity, Velocity(vel_y=4.0))
    result = engine.run_single_system(lambda ge, vels: [v.vel_y for _, v in vels], Velocity)
    assert result == [4.0]