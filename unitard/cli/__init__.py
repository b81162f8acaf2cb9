"""CLI helpers for applications embedding unitard."""

from .unit import unit

__all__ = ["unit"]
