"""Module entrypoint for running rot13action as ``python -m rot13action``.

The composite `action.yml` step invokes this module with the `run` command.
"""

from __future__ import annotations

from rot13action.cli import main


if __name__ == "__main__":
    main()
