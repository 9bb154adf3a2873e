"""Command implementations for the unicode CLI."""

from __future__ import annotations

from .lookup import lookup


__all__ = ["lookup"]
