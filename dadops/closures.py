"""Small helpers built from closures."""

from __future__ import annotations


def total(*args):
    """Return the sum of the given integers."""
    return sum(args)


def incrementor():
    """Return a counter that yields 1, 2, 3, ... on successive calls."""
    value = 0

    def step():
        nonlocal value
        value += 1
        return value

    return step


def decrementor():
    """Return a counter that yields -1, -2, -3, ... on successive calls."""
    value = 0

    def step():
        nonlocal value
        value -= 1
        return value

    return step