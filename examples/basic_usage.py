"""Basic sassy_gradients usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

from sassy_gradients import (
    RenderConfig,
    debug_dump,
    legacy_direction,
    make_gradient,
    render_css,
)


def demonstrate_directions() -> None:
    # Modern keywords and angles next to their legacy spelling.
    for direction in ("to top", "to right bottom", "30deg", "0.25turn"):
        print(f"{direction!r:>20} -> legacy {legacy_direction(direction)}")


def demonstrate_gradients() -> None:
    sunset = make_gradient("to bottom right", "red 20%", "yellow", "green", "blue 55%", "red 55%", "green")
    print("Normalized stops:", ", ".join(str(s) for s in sunset.color_stops))
    print(render_css(sunset, config=RenderConfig(legacy_prefix=True, precision=3)))

    # Equal hard-edged bands, one per color.
    flag = make_gradient("90deg", "#002395", "#fff", "#ed2939").stripes()
    print(render_css(flag))


def demonstrate_debug() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    debug_dump(make_gradient("to top", "white", "black"))


if __name__ == "__main__":
    demonstrate_directions()
    demonstrate_gradients()
    demonstrate_debug()
