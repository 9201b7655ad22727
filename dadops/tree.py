"""Drawing commands for a recursive binary tree."""

from __future__ import annotations


def branch(size, ratio, angle, iterations):
    """Yield the drawing commands for one stem and its child stems."""
    yield "color black"
    yield f"width {size:f}"
    yield f"forward {size:f}"
    yield "color off"

    if iterations > 0:
        yield f"left {angle:f}"
        yield from branch(size * ratio, ratio, angle, iterations - 1)
        yield f"right {angle * 2:f}"
        yield from branch(size * ratio, ratio, angle, iterations - 1)
        yield f"left {angle:f}"

    yield "left 180"
    yield f"forward {size:f}"
    yield "left 180"


def draw(size=5, ratio=0.7, angle=30, iterations=5):
    """Print and return the full drawing, starting with "draw mode"."""
    lines = ["draw mode", *branch(size, ratio, angle, iterations)]
    for line in lines:
        print(line)
    return lines