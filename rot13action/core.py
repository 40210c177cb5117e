"""Host boundary capability for action runs.

Responsibilities:
- Define the four host operations the orchestrator depends on.
- Provide an in-memory implementation for tests and local runs.
- Bind the operations to GitHub Actions runner conventions.

Key types:
- `ActionCore`: interface for input read, output write, failure report and logging.
- `MemoryCore`: in-memory recorder implementation.
- `GitHubActionsCore`: environment- and workflow-command-backed implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Mapping
import uuid

from .telemetry.logger import ActionLogger


class ActionCore:
    """Interface for host operations used by the action orchestrator."""

    def get_input(self, name: str) -> str | None:
        """Read a named input, returning `None` when the host did not supply it."""

        raise NotImplementedError

    def set_output(self, name: str, value: str) -> None:
        """Emit a named output value."""

        raise NotImplementedError

    def set_failed(self, message: str) -> None:
        """Report terminal failure without terminating the process."""

        raise NotImplementedError

    def info(self, message: str) -> None:
        """Emit one diagnostic log line."""

        raise NotImplementedError


@dataclass(slots=True)
class MemoryCore(ActionCore):
    """Action core that keeps inputs and every emitted effect in memory."""

    inputs: Mapping[str, object] = field(default_factory=dict)
    outputs: dict[str, str] = field(default_factory=dict)
    output_writes: list[tuple[str, str]] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """Return whether a failure has been reported."""

        return bool(self.failures)

    def get_input(self, name: str) -> str | None:
        # Non-string values are passed through so validation can reject them.
        return self.inputs.get(name)  # type: ignore[return-value]

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        self.output_writes.append((name, value))

    def set_failed(self, message: str) -> None:
        self.failures.append(message)

    def info(self, message: str) -> None:
        self.messages.append(message)


def escape_command_data(value: str) -> str:
    """Escape workflow command message data."""

    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_command_property(value: str) -> str:
    """Escape workflow command property values."""

    return escape_command_data(value).replace(":", "%3A").replace(",", "%2C")


def format_workflow_command(
    command: str, message: str, properties: Mapping[str, str] | None = None
) -> str:
    """Render one `::command key=value::message` workflow command line."""

    rendered = f"::{command}"
    if properties:
        rendered += " " + ",".join(
            f"{key}={escape_command_property(value)}" for key, value in properties.items()
        )
    return f"{rendered}::{escape_command_data(message)}"


def input_env_key(name: str) -> str:
    """Return the runner environment variable name carrying input `name`."""

    return f"INPUT_{name.replace(' ', '_').upper()}"


def format_output_record(name: str, value: str, delimiter: str) -> str:
    """Render one heredoc-style record for the `GITHUB_OUTPUT` file.

    Raises:
        ValueError: If the name or value contains the delimiter.
    """

    if delimiter in name:
        raise ValueError(f"Output name must not contain the delimiter `{delimiter}`.")
    if delimiter in value:
        raise ValueError(f"Output value must not contain the delimiter `{delimiter}`.")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class GitHubActionsCore(ActionCore):
    """Action core bound to the GitHub Actions runner environment.

    Inputs are read from `INPUT_<NAME>` variables, outputs are appended to the
    file named by `GITHUB_OUTPUT` (or sent as a legacy `set-output` command when
    the variable is absent), and failures become `::error::` commands plus a
    non-zero `exit_code` for the caller to return.
    """

    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        logger: ActionLogger | None = None,
        trim_whitespace: bool = True,
    ) -> None:
        """Initialize the core from an environment mapping and output logger."""

        self._env: Mapping[str, str] = os.environ if env is None else env
        self._logger = logger or ActionLogger()
        self._trim_whitespace = trim_whitespace
        self.exit_code = 0

    @property
    def failed(self) -> bool:
        """Return whether a failure has been reported."""

        return self.exit_code != 0

    def get_input(self, name: str) -> str | None:
        value = self._env.get(input_env_key(name))
        if value is None:
            return None
        if self._trim_whitespace:
            return value.strip()
        return value

    def set_output(self, name: str, value: str) -> None:
        output_file = self._env.get("GITHUB_OUTPUT")
        if output_file:
            record = format_output_record(name, value, f"ghadelimiter_{uuid.uuid4()}")
            with Path(output_file).open("a", encoding="utf-8") as handle:
                handle.write(record)
            return
        self._logger.line(format_workflow_command("set-output", value, {"name": name}))

    def set_failed(self, message: str) -> None:
        self.exit_code = 1
        self._logger.line(format_workflow_command("error", message), level="ERROR")

    def info(self, message: str) -> None:
        self._logger.line(message)
