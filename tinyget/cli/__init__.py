"""CLI entry point for TinyGet."""

from __future__ import annotations

from tinyget.cli.commands import tinyget

cli = tinyget

__all__ = ["cli"]
