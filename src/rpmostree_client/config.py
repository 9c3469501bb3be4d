"""Runtime configuration for the status client."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass

from rpmostree_client.invoker import (
    DEFAULT_COMMAND,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RETRY_PAUSE_SECONDS,
    InvokerConfig,
)


@dataclass(slots=True)
class ClientSettings:
    """Status command line and retry policy."""

    command: tuple[str, ...] = DEFAULT_COMMAND
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_pause_seconds: float = DEFAULT_RETRY_PAUSE_SECONDS

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Load settings from environment, keeping defaults for unset variables."""

        raw_command = os.getenv("RPMOSTREE_CLIENT_COMMAND", "").strip()
        return cls(
            command=tuple(shlex.split(raw_command)) if raw_command else DEFAULT_COMMAND,
            max_attempts=_env_int("RPMOSTREE_CLIENT_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
            retry_pause_seconds=_env_float(
                "RPMOSTREE_CLIENT_RETRY_PAUSE_SECONDS",
                DEFAULT_RETRY_PAUSE_SECONDS,
            ),
        )

    def validate(self) -> None:
        """Raise configuration error if the retry policy is unusable."""

        if not self.command:
            raise ValueError("RPMOSTREE_CLIENT_COMMAND must not be empty.")
        if self.max_attempts < 1:
            raise ValueError("RPMOSTREE_CLIENT_MAX_ATTEMPTS must be >= 1.")
        if self.retry_pause_seconds < 0:
            raise ValueError("RPMOSTREE_CLIENT_RETRY_PAUSE_SECONDS must be >= 0.")

    def to_invoker_config(self) -> InvokerConfig:
        return InvokerConfig(
            command=self.command,
            max_attempts=self.max_attempts,
            retry_pause_seconds=self.retry_pause_seconds,
        )


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as error:
        raise ValueError(f"Invalid integer value for {name}: {value!r}") from error


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value.strip())
    except ValueError as error:
        raise ValueError(f"Invalid number value for {name}: {value!r}") from error
