"""Utility functions for b65536.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import decoded_length, encoded_length, encoded_size

__all__ = [
    "encoded_length",
    "encoded_size",
    "decoded_length",
]
