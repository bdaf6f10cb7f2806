from types import SimpleNamespace

import pytest

from latren.systems import SystemNotConfiguredError, Systems


def make_game():
    window = SimpleNamespace(input_system=object())
    return SimpleNamespace(
        entity_manager=object(),
        game_window=window,
        renderer=object(),
        resources=object(),
        audio_player=object(),
        physics=object(),
        time=12.5,
        delta_time=0.25,
    )


def test_unconfigured_system_raises():
    systems = Systems()
    with pytest.raises(SystemNotConfiguredError):
        systems.get("renderer")
    with pytest.raises(SystemNotConfiguredError):
        systems.get_time()


def test_get_game_without_instance_raises():
    with pytest.raises(SystemNotConfiguredError):
        Systems().get_game()


def test_unknown_system_name_raises_value_error():
    systems = Systems()
    with pytest.raises(ValueError):
        systems.get("teleporter")
    with pytest.raises(ValueError):
        systems.set_getter("teleporter", lambda: None)


def test_custom_getter_is_used():
    systems = Systems()
    renderer = object()
    systems.set_getter("renderer", lambda: renderer)
    assert systems.get("renderer") is renderer


def test_time_getters_return_floats():
    systems = Systems()
    systems.set_getter("time", lambda: 3)
    systems.set_getter("delta_time", lambda: 0.5)
    assert systems.get_time() == 3.0
    assert isinstance(systems.get_time(), float)
    assert systems.get_delta_time() == 0.5


def test_use_game_instance_wires_every_system():
    systems = Systems()
    game = make_game()
    systems.use_game_instance(game)
    assert systems.get_game() is game
    assert systems.get("entity_manager") is game.entity_manager
    assert systems.get("game_window") is game.game_window
    assert systems.get("input_system") is game.game_window.input_system
    assert systems.get("renderer") is game.renderer
    assert systems.get("resources") is game.resources
    assert systems.get("audio_player") is game.audio_player
    assert systems.get("physics") is game.physics
    assert systems.get_time() == game.time
    assert systems.get_delta_time() == game.delta_time


def test_game_values_are_read_lazily():
    systems = Systems()
    game = make_game()
    systems.use_game_instance(game)
    game.time = 99.0
    assert systems.get_time() == 99.0


def test_getter_can_be_replaced_after_game_instance():
    systems = Systems()
    systems.use_game_instance(make_game())
    physics = object()
    systems.set_getter("physics", lambda: physics)
    assert systems.get("physics") is physics


def test_instances_do_not_share_getters():
    first = Systems()
    second = Systems()
    first.set_getter("time", lambda: 1.0)
    assert first.get_time() == 1.0
    with pytest.raises(SystemNotConfiguredError):
        second.get_time()