"""Failure kinds raised by provisioning steps.

Steps raise; the pipeline runner reports and stops.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .utils import CommandResult


class ProvisionError(Exception):
    """Fatal step failure."""


class MissingConfigError(ProvisionError):
    def __init__(self, keys: Iterable[str], source: str = ".env"):
        self.keys = list(keys)
        super().__init__(f"missing required keys in {source}: {', '.join(self.keys)}")


class CommandError(ProvisionError):
    def __init__(
        self,
        action: str,
        argv: Sequence[str],
        result: CommandResult,
        message: str | None = None,
    ):
        self.action = action
        self.argv = list(argv)
        self.result = result
        if message is None:
            message = f"{action} failed (exit={result.code})"
            detail = result.diagnostic()
            if detail:
                message = f"{message}:\n{detail}"
        super().__init__(message)


class PortConflictError(CommandError):
    def __init__(self, argv: Sequence[str], result: CommandResult):
        super().__init__(
            "container start",
            argv,
            result,
            "a port required by the containers is already in use; "
            "stop the other server or container and re-run",
        )


class DbTimeoutError(ProvisionError):
    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"database not reachable after {attempts} attempts")


class PatchError(ProvisionError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"could not patch {path}: {reason}")


class SkipStep(Exception):
    """Non-fatal: a prerequisite artifact is missing, step left undone."""
