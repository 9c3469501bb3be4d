"""Error taxonomy for status queries."""

from __future__ import annotations


class StatusQueryError(RuntimeError):
    """Base error for one failed status query."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SpawnFailure(StatusQueryError):
    """Status command could not be launched. Never retried."""

    def __init__(self, message: str, *, command: tuple[str, ...]) -> None:
        super().__init__(message)
        self.command = command


class CommandFailure(StatusQueryError):
    """Status command kept exiting non-zero until attempts ran out."""

    def __init__(self, message: str, *, stderr: str, exit_code: int, attempts: int) -> None:
        super().__init__(message)
        self.stderr = stderr
        self.exit_code = exit_code
        self.attempts = attempts


class DecodeFailure(StatusQueryError):
    """Status output does not match the expected schema."""


class Error(RuntimeError):
    """Generic catchall error, meant to be shown to a user as a string."""
