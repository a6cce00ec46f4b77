"""Command-line interface for b65536."""

from __future__ import annotations

from .config import CliConfig

__all__ = ["CliConfig"]
