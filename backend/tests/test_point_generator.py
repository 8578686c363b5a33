"""
Tests for the random demo point generator and the chart builders.

These exercise the pure service helpers without going through HTTP.
"""

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.services.charts import (
    MAX_DEMO_EPSILON,
    MIN_DEMO_EPSILON,
    build_chart_config,
    build_demo_charts,
    clamp_demo_epsilon,
)
from app.services.point_generator import generate_random_points


def test_generated_x_values_are_distinct_and_sorted() -> None:
    labels, points = generate_random_points(50, 60, 10, seed=7)
    xs = [p[0] for p in points]
    assert len(points) == 60  # raised to the x ceiling
    assert xs == sorted(xs)
    assert len(set(xs)) == len(xs)
    assert labels == xs
    assert all(0.0 <= x <= 60.0 for x in xs)
    assert all(0.0 <= p[1] <= 10.0 for p in points)


def test_generator_fills_every_x_when_count_exceeds_ceiling_by_one() -> None:
    labels, _ = generate_random_points(11, 10, 5, seed=1)
    assert labels == [float(x) for x in range(11)]


def test_generator_is_reproducible_with_seed() -> None:
    assert generate_random_points(seed=42) == generate_random_points(seed=42)


def test_generator_rejects_impossible_requests() -> None:
    with pytest.raises(ValueError):
        generate_random_points(20, 10, 10)
    with pytest.raises(ValueError):
        generate_random_points(5, 5, -1)


def test_clamp_demo_epsilon() -> None:
    assert clamp_demo_epsilon(0.0) == MIN_DEMO_EPSILON
    assert clamp_demo_epsilon(-4.0) == MIN_DEMO_EPSILON
    assert clamp_demo_epsilon(250.0) == MAX_DEMO_EPSILON
    assert clamp_demo_epsilon(3.14159) == pytest.approx(3.1)


def test_build_chart_config_shape() -> None:
    config = build_chart_config([0.0, 1.0], [(0.0, 2.0), (1.0, 3.0)], "Line", "#000000")
    assert config["type"] == "line"
    dataset = config["data"]["datasets"][0]
    assert dataset["label"] == "Line"
    assert dataset["borderColor"] == "#000000"
    assert dataset["data"] == [[0.0, 2.0], [1.0, 3.0]]
    assert config["options"]["elements"]["point"]["radius"] == 0
    assert config["options"]["maintainAspectRatio"] is False


def test_build_demo_charts_simplifies_second_chart() -> None:
    labels = [0.0, 1.0, 2.0, 3.0]
    points = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]
    original, simplified = build_demo_charts(labels, points, 0.5)
    assert len(original["data"]["datasets"][0]["data"]) == 4
    assert simplified["data"]["datasets"][0]["data"] == [[0.0, 0.0], [3.0, 3.0]]
    assert simplified["data"]["datasets"][0]["label"] == "With RDP Tolerance"
