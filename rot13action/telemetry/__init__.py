"""Run logging for CLI-observable action activity."""

from .logger import ActionLogger

__all__ = ["ActionLogger"]
