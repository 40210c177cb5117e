"""Text transformation primitives."""

from .rot13 import ALPHABET_SIZE, ROTATION, rot13

__all__ = ["ALPHABET_SIZE", "ROTATION", "rot13"]
