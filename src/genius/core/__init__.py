"""Core process-level helpers."""

from .global_paths import GlobalPath

__all__ = ["GlobalPath"]
