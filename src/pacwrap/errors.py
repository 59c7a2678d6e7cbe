"""Exception hierarchy for pacwrap."""

from __future__ import annotations

from typing import Optional


class PacwrapError(Exception):
    """Base exception for all pacwrap errors."""

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnrecognizedOperation(PacwrapError):
    """The given flag combination does not name a supported operation."""


class BackendUnsupportedOperation(PacwrapError):
    """The selected package manager has no implementation for the operation."""

    def __init__(self, pm: str, op: str) -> None:
        super().__init__(
            f"Operation `{op}` is not implemented for `{pm}`",
            hint="run with --compat-table to see what each package manager supports",
        )
        self.pm = pm
        self.op = op


class ProcessSpawnFailure(PacwrapError):
    """The external command could not be started."""

    def __init__(self, cmd, pm: Optional[str] = None, reason: Optional[str] = None) -> None:
        where = f" [{pm}]" if pm else ""
        super().__init__(f"Failed to run `{cmd}`{where}: {reason or 'spawn failed'}")
        self.cmd = cmd
        self.pm = pm


class ProcessExitFailure(PacwrapError):
    """The external command exited with a non-zero status."""

    def __init__(self, cmd, code: int, pm: Optional[str] = None) -> None:
        where = f" [{pm}]" if pm else ""
        super().__init__(f"Command `{cmd}`{where} failed with exit code {code}")
        self.cmd = cmd
        self.code = code
        self.pm = pm


class PromptCanceled(PacwrapError):
    """The user declined a confirmation prompt."""

    def __init__(self, cmd=None) -> None:
        super().__init__("Canceled" if cmd is None else f"Canceled `{cmd}`")
        self.cmd = cmd


class ConfigLoadFailure(PacwrapError):
    """The configuration file exists but could not be read."""

    def __init__(self, path, reason: str) -> None:
        super().__init__(f"Failed to load config {path}: {reason}")
        self.path = path


class InvalidOutputEncoding(PacwrapError):
    """Captured command output is not valid UTF-8."""

    def __init__(self, cmd) -> None:
        super().__init__(f"Output of `{cmd}` is not valid UTF-8")
        self.cmd = cmd
