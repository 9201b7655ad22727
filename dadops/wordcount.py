"""Counting whitespace-separated words."""

from __future__ import annotations

from collections import Counter


def word_count(text):
    """Return how often each whitespace-separated word occurs in ``text``."""
    return dict(Counter(text.split()))