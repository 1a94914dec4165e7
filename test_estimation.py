"""Distance estimate and direction sectors."""

import pytest

from echoguard.config import AlertConfig
from echoguard.direction import AHEAD, LEFT, RIGHT, classify_direction
from echoguard.distance import estimate_distance


# --------------------------- distance ---------------------------

def test_person_at_80px_is_3_8_meters():
    assert estimate_distance("person", 80) == 3.8


def test_car_uses_its_own_width():
    # 1.8 * 600 / 200 = 5.4
    assert estimate_distance("car", 200) == 5.4


def test_rounds_half_up():
    # 0.5 * 600 / 1200 = 0.25
    assert estimate_distance("person", 1200) == 0.3


def test_unknown_class_has_no_distance():
    assert estimate_distance("dog", 120) is None
    assert estimate_distance("traffic light", 120) is None


def test_distance_decreases_as_box_grows():
    widths = [51, 60, 80, 120, 200, 400, 640]
    distances = [estimate_distance("bicycle", w) for w in widths]
    assert distances == sorted(distances, reverse=True)
    assert distances[0] > distances[-1]


@pytest.mark.parametrize("width", [0, -10])
def test_non_positive_width_is_rejected(width):
    with pytest.raises(ValueError):
        estimate_distance("person", width)


def test_custom_table_and_focal_length():
    cfg = AlertConfig(real_widths={"dog": 0.4}, focal_length=1000.0)
    assert estimate_distance("dog", 100, real_widths=cfg.real_widths, focal_length=cfg.focal_length) == 4.0
    assert estimate_distance("person", 100, real_widths=cfg.real_widths) is None


# --------------------------- direction ---------------------------

def test_mirrored_feed_flips_sides():
    # Raw pixel position on the left of the image is the user's right
    assert classify_direction(0, 60, 640) == RIGHT
    assert classify_direction(580, 60, 640) == LEFT
    assert classify_direction(290, 60, 640) == AHEAD


def test_box_from_person_scenario_is_right():
    # center 140 -> flipped 500 > 426.7
    assert classify_direction(100, 80, 640) == RIGHT


@pytest.mark.parametrize("x, expected", [
    (149, RIGHT),   # flipped 401
    (150, AHEAD),   # flipped 400 == 2/3
    (151, AHEAD),
    (349, AHEAD),
    (350, AHEAD),   # flipped 200 == 1/3
    (351, LEFT),    # flipped 199
])
def test_third_boundaries_are_ahead(x, expected):
    assert classify_direction(x, 100, 600) == expected


def test_sectors_are_contiguous():
    frame_width = 900
    seen = [classify_direction(c, 0, frame_width) for c in range(frame_width + 1)]
    # Walking the raw axis left to right: right, then ahead, then left, no interleaving
    changes = [seen[0]] + [b for a, b in zip(seen, seen[1:]) if a != b]
    assert changes == [RIGHT, AHEAD, LEFT]


def test_default_width_table_is_read_only():
    from echoguard.config import DEFAULT_CONFIG
    with pytest.raises(TypeError):
        DEFAULT_CONFIG.real_widths["dog"] = 0.4
    assert "dog" not in DEFAULT_CONFIG.real_widths
    assert estimate_distance("dog", 100) is None
