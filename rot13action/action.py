"""Action orchestration: validate the input, transform it, emit the output.

Every side effect goes through the injected `ActionCore`, so the same flow
runs against the GitHub Actions runner or an in-memory recorder.
"""

from __future__ import annotations

from .config import ActionConfig
from .core import ActionCore
from .errors import ValidationError
from .text.rot13 import rot13
from .validation import validate_text_input


def run_action(core: ActionCore, config: ActionConfig | None = None) -> bool:
    """Run one ROT-13 action invocation against `core`.

    Returns:
        `True` when the output was written, `False` when a failure was reported.
    """

    resolved_config = config if config is not None else ActionConfig()

    raw_value = core.get_input(resolved_config.input_name)
    try:
        text = validate_text_input(raw_value, resolved_config.input_name)
    except ValidationError as exc:
        message = exc.detail if not exc.hint else f"{exc.detail} {exc.hint}"
        core.set_failed(message)
        return False

    core.info(f"Transforming input `{resolved_config.input_name}` ({len(text)} characters).")
    result = rot13(text)
    core.set_output(resolved_config.output_name, result)
    core.info(f"Wrote output `{resolved_config.output_name}`.")
    return True
