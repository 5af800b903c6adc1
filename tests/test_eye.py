import math

import numpy as np
import pytest

from evoforage.simulation.eye import Eye, EyeConfig

CELLS = 13


def render(retina: np.ndarray) -> str:
    """Draw a retina as a string: '#' strong, '+' medium, '.' weak, ' ' nothing."""
    chars = []
    for cell in retina:
        if cell >= 0.7:
            chars.append("#")
        elif cell >= 0.3:
            chars.append("+")
        elif cell > 0.0:
            chars.append(".")
        else:
            chars.append(" ")
    return "".join(chars)


def look(food, *, x=0.5, y=0.5, rotation=0.0, fov_angle=math.pi / 2, max_distance=1.0, cells=CELLS):
    eye = Eye(EyeConfig(fov_angle=fov_angle, cells=cells, max_distance=max_distance))
    return eye.process_vision(
        np.array([x, y]), rotation, np.array(food, dtype=float).reshape(-1, 2)
    )


@pytest.mark.parametrize(
    "max_distance, expected",
    [
        (1.0, "      #      "),
        (0.5, "      +      "),
        (0.4, "      +      "),
        (0.25, "      .      "),
        (0.15, "             "),
        (0.1, "             "),
    ],
)
def test_activation_falls_off_with_distance(max_distance, expected):
    assert render(look([(0.7, 0.5)], max_distance=max_distance)) == expected


def cell_marker(index: int) -> str:
    return " " * index + "#" + " " * (CELLS - index - 1)


@pytest.mark.parametrize(
    "rotation, cell",
    [
        (0.00 * math.pi, 9),  # food is to our left
        (0.25 * math.pi, 8),
        (0.50 * math.pi, 6),  # straight ahead
        (0.75 * math.pi, 4),
        (1.00 * math.pi, 3),
        (1.25 * math.pi, 1),
        (1.75 * math.pi, 11),
        (2.00 * math.pi, 9),  # full turn
        (2.50 * math.pi, 6),
    ],
)
def test_sector_follows_rotation(rotation, cell):
    retina = look([(0.5, 0.7)], rotation=rotation, fov_angle=2 * math.pi)
    assert render(retina) == cell_marker(cell)


def test_food_behind_is_invisible_with_narrow_fov():
    assert not look([(0.3, 0.5)]).any()


def test_sees_across_the_right_edge():
    retina = look([(0.05, 0.5)], x=0.95, max_distance=0.25)
    assert render(retina) == "      +      "
    assert retina[6] == pytest.approx(0.6)


def test_sees_across_the_bottom_edge():
    retina = look([(0.5, 0.97)], y=0.02, rotation=1.5 * math.pi, max_distance=0.25)
    assert retina[6] == pytest.approx(0.8)
    assert retina.sum() == pytest.approx(0.8)


def test_boundary_food_goes_to_lower_sector():
    # straight ahead is exactly the border between the two sectors
    retina = look([(0.7, 0.5)], cells=2)
    assert retina[0] > 0.0
    assert retina[1] == 0.0


def test_food_in_one_sector_adds_up():
    retina = look([(0.6, 0.5), (0.7, 0.5)], cells=3, max_distance=0.25)
    np.testing.assert_allclose(retina, (0.0, 0.8, 0.0))


def test_no_food():
    retina = look([], cells=4)
    assert retina.shape == (4,)
    assert not retina.any()


def test_retina_is_non_negative():
    rng = np.random.default_rng(5)
    retina = look(rng.random((200, 2)), fov_angle=1.25 * math.pi, max_distance=0.25, cells=9)
    assert retina.shape == (9,)
    assert np.all(retina >= 0.0)


@pytest.mark.parametrize(
    "config",
    [
        EyeConfig(fov_angle=math.pi, cells=0, max_distance=0.25),
        EyeConfig(fov_angle=0.0, cells=9, max_distance=0.25),
        EyeConfig(fov_angle=math.pi, cells=9, max_distance=-0.1),
    ],
)
def test_invalid_eye_config(config):
    with pytest.raises(ValueError):
        Eye(config)
