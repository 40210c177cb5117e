"""Top-level package for rot13action.

This package applies the ROT-13 letter substitution to one action input and
writes the result to one action output. The orchestration entry point is
`run_action`; the pure transform is `rot13`.
"""

from .action import run_action
from .text.rot13 import rot13

__all__ = ["rot13", "run_action", "__version__"]

__version__ = "0.1.0"
