"""The "two-fer" sharing phrase."""

from __future__ import annotations


def share_with(name=""):
    """Return "One for <name>, one for me.", using "you" when ``name`` is empty."""
    return f"One for {name or 'you'}, one for me."