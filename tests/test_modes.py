from __future__ import annotations

import math

import pytest

from stimulus.modes import AVAILABLE_MODES, Point, TrajectoryMode, get_mode, list_modes, register_mode
from stimulus.modes.circular import circular_pos
from stimulus.modes.horizontal import horizontal_pos
from stimulus.modes.jump import SEQUENCE, jump_pos, step_index
from stimulus.modes.pursuit import pursuit_pos


def test_registry_has_the_four_modes() -> None:
    assert set(AVAILABLE_MODES) == {"horizontal", "circular", "jump", "random"}


@pytest.mark.parametrize("key", ["horizontal", "circular", "jump", "random"])
def test_mode_exposes_name_duration_and_callable(key: str) -> None:
    mode = AVAILABLE_MODES[key]
    assert mode.key == key
    assert isinstance(mode.name, str) and mode.name
    assert mode.duration > 0
    assert callable(mode.get_pos)


def test_durations_and_names() -> None:
    assert get_mode("horizontal").duration == 15000
    assert get_mode("circular").duration == 15000
    assert get_mode("jump").duration == 16000
    assert get_mode("random").duration == 20000
    assert get_mode("jump").name == "Step / Saccade (Jump)"


def test_unknown_key_is_absent_from_mapping() -> None:
    assert AVAILABLE_MODES.get("spiral") is None


def test_get_mode_unknown_key_lists_available() -> None:
    with pytest.raises(ValueError, match="horizontal"):
        get_mode("spiral")


def test_register_mode_rejects_duplicate_key() -> None:
    dup = TrajectoryMode(key="jump", name="Other", duration=1, get_pos=jump_pos)
    with pytest.raises(ValueError):
        register_mode(dup)
    assert AVAILABLE_MODES["jump"].name == "Step / Saccade (Jump)"


def test_list_modes_sorted_by_key() -> None:
    assert [m.key for m in list_modes()] == ["circular", "horizontal", "jump", "random"]


def test_modes_are_immutable() -> None:
    with pytest.raises(AttributeError):
        get_mode("horizontal").duration = 1


@pytest.mark.parametrize("key", ["horizontal", "circular", "jump", "random"])
@pytest.mark.parametrize("progress", [0.0, 0.1234, 0.5, 0.987, 1.0])
def test_get_pos_is_deterministic(key: str, progress: float) -> None:
    mode = AVAILABLE_MODES[key]
    assert mode.get_pos(progress, 1280, 720) == mode.get_pos(progress, 1280, 720)


@pytest.mark.parametrize(
    "progress, expected_x",
    [(0.0, 500.0), (0.125, 900.0), (0.25, 500.0), (0.375, 100.0), (0.5, 500.0), (1.0, 500.0)],
)
def test_horizontal_values(progress: float, expected_x: float) -> None:
    x, y = horizontal_pos(progress, 1000, 600)
    assert x == pytest.approx(expected_x, abs=1e-9)
    assert y == 300


def test_circular_start_and_half_turn() -> None:
    radius = 0.35 * 600
    assert circular_pos(0.0, 1000, 600) == pytest.approx((500 + radius, 300))
    assert circular_pos(0.25, 1000, 600) == pytest.approx((500 - radius, 300))


def test_circular_stays_on_circle() -> None:
    radius = 0.35 * 480
    for i in range(50):
        x, y = circular_pos(i / 49, 800, 480)
        assert math.hypot(x - 400, y - 240) == pytest.approx(radius)


@pytest.mark.parametrize(
    "progress, expected",
    [(0.0, (500, 500)), (0.13, (200, 200)), (0.3, (800, 800)), (0.99, (500, 500)), (1.0, (500, 500))],
)
def test_jump_waypoints(progress: float, expected) -> None:
    assert jump_pos(progress, 1000, 1000) == pytest.approx(expected)


def test_jump_index_is_clamped() -> None:
    assert step_index(1.0) == len(SEQUENCE) - 1
    assert step_index(1.7) == len(SEQUENCE) - 1
    assert step_index(-0.2) == 0


def test_jump_does_not_interpolate() -> None:
    assert jump_pos(0.124, 1000, 1000) == jump_pos(0.0, 1000, 1000)
    assert jump_pos(0.125, 1000, 1000) == pytest.approx((200, 200))


def test_random_stays_inside_inner_box() -> None:
    w, h = 1920, 1080
    for i in range(2001):
        x, y = pursuit_pos(i / 2000, w, h)
        assert 0.1 * w - 1e-9 <= x <= 0.9 * w + 1e-9
        assert 0.1 * h - 1e-9 <= y <= 0.9 * h + 1e-9


def test_random_start_matches_formula() -> None:
    # t=0: 오직 cos 항만 남음
    x, y = pursuit_pos(0.0, 1000, 1000)
    assert x == pytest.approx((0.5 + 0.4 * 0.3) * 1000)
    assert y == pytest.approx((0.5 + 0.4 * 0.3) * 1000)


def test_point_unpacks_and_has_fields() -> None:
    p = get_mode("horizontal").get_pos(0.0, 100, 50)
    assert isinstance(p, Point)
    x, y = p
    assert (p.x, p.y) == (x, y) == (50, 25)


def test_position_at_clamps_elapsed_time() -> None:
    mode = get_mode("jump")
    assert mode.position_at(0, 1000, 1000) == pytest.approx((500, 500))
    assert mode.position_at(2000, 1000, 1000) == pytest.approx((200, 200))
    assert mode.position_at(-500, 1000, 1000) == mode.get_pos(0.0, 1000, 1000)
    assert mode.position_at(99999, 1000, 1000) == mode.get_pos(1.0, 1000, 1000)


def test_is_finished() -> None:
    mode = get_mode("circular")
    assert not mode.is_finished(14999)
    assert mode.is_finished(15000)


def test_describe_omits_function() -> None:
    assert get_mode("random").describe() == {"key": "random", "name": "Random Pursuit", "duration": 20000}
