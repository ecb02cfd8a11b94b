import numpy as np
import pytest
from sassy_gradients.stops import parse_color_stop, parse_position, normalize_color_stops
from sassy_gradients.types.stop_types import ColorStop
from sassy_gradients import make_gradient


def positions(stops):
    return [s.position for s in stops]


def test_parse_authored_strings():
    assert parse_color_stop("red 20%") == ColorStop("red", 20.0)
    assert parse_color_stop("  yellow ") == ColorStop("yellow", None)
    assert parse_color_stop("#ff0 12.5%") == ColorStop("#ff0", 12.5)
    assert parse_color_stop("rgba(0, 0, 0, 0.5) 40%") == ColorStop("rgba(0, 0, 0, 0.5)", 40.0)
    assert parse_color_stop("rgb(0, 0, 0)") == ColorStop("rgb(0, 0, 0)", None)


def test_parse_pairs_and_colors():
    assert parse_color_stop(("blue", "55%")) == ColorStop("blue", 55.0)
    assert parse_color_stop(("blue", 55)) == ColorStop("blue", 55.0)
    assert parse_color_stop(("blue", None)) == ColorStop("blue", None)
    assert parse_color_stop(((255, 0, 0), 10)) == ColorStop("rgb(255, 0, 0)", 10.0)
    assert parse_color_stop((255, 0, 0)) == ColorStop("rgb(255, 0, 0)", None)
    assert parse_color_stop(np.array([0, 128, 255])) == ColorStop("rgb(0, 128, 255)", None)
    assert parse_color_stop(ColorStop("green", 5)) == ColorStop("green", 5.0)


def test_parse_rejects_bad_input():
    with pytest.raises(ValueError):
        parse_color_stop(("red", "twenty"))
    with pytest.raises(ValueError):
        parse_position(True)
    with pytest.raises(TypeError):
        parse_color_stop(12)
    # Lengths and unitless numbers are not supported positions.
    for authored in ("blue 20px", "blue 0.5", "blue 1e2em", "blue -3rem"):
        with pytest.raises(ValueError):
            parse_color_stop(authored)


def test_color_stop_str():
    assert str(ColorStop("red", 20.0)) == "red 20%"
    assert str(ColorStop("red")) == "red"
    assert str(ColorStop("red", 31.25)) == "red 31.25%"


def test_endpoints_default_to_0_and_100():
    stops = normalize_color_stops(["red", "blue"])
    assert stops == (ColorStop("red", 0.0), ColorStop("blue", 100.0))


def test_evenly_spaced_interior():
    """Only endpoints positioned: interior stops are 100% / (k + 1) apart."""
    for k in range(1, 8):
        authored = ["black"] + ["gray"] * k + ["white"]
        stops = normalize_color_stops(authored)
        got = positions(stops)
        assert got[0] == 0.0 and got[-1] == 100.0
        steps = np.diff(got)
        assert np.allclose(steps, 100.0 / (k + 1))


def test_mixed_positions():
    stops = normalize_color_stops(["red 20%", "yellow", "green", "blue 55%", "red 55%", "green"])
    assert [s.color for s in stops] == ["red", "yellow", "green", "blue", "red", "green"]
    assert positions(stops) == pytest.approx([20, 31.6667, 43.3333, 55, 55, 100], abs=1e-3)


def test_only_first_positioned():
    stops = normalize_color_stops(["red 10%", "blue", "green"])
    assert positions(stops) == pytest.approx([10, 55, 100])


def test_positioned_stops_untouched():
    authored = ["red 5%", "blue 42.5%", "green 90%"]
    assert positions(normalize_color_stops(authored)) == [5.0, 42.5, 90.0]


def test_non_monotonic_positions_are_kept():
    """Backwards positions are not re-validated; the gap is still filled linearly."""
    stops = normalize_color_stops(["red 50%", "blue", "green 10%"])
    assert positions(stops) == pytest.approx([50, 30, 10])


def test_non_decreasing_output():
    stops = normalize_color_stops(["a", "b 10%", "c", "d", "e 10%", "f", "g"])
    got = positions(stops)
    assert all(x <= y for x, y in zip(got, got[1:]))
    assert len(got) == 7


def test_color_functions_are_not_positions():
    """Trailing tokens inside a color function are part of the color."""
    assert parse_color_stop("rgb(0 0 0)") == ColorStop("rgb(0 0 0)", None)
    assert parse_color_stop("hsl(120 50% 50%)") == ColorStop("hsl(120 50% 50%)", None)


def test_gradient_rejects_length_positions():
    with pytest.raises(ValueError):
        make_gradient("to right", "red", "blue 20px", "green")
