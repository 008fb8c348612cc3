"""
Test helpers for tengen tests.

This package provides utilities for:
- Placing stones by GTP-style label
- Random legal play-outs for property tests
"""

from .board_setup import at, random_playout, setup_stones

__all__ = [
    "at",
    "random_playout",
    "setup_stones",
]
