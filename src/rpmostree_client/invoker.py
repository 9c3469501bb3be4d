"""Subprocess runner for `rpm-ostree status` with fixed-interval retry."""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Callable
from dataclasses import dataclass

from rpmostree_client.errors import CommandFailure, SpawnFailure

logger = logging.getLogger(__name__)

DEFAULT_COMMAND: tuple[str, ...] = ("rpm-ostree", "status", "--json")
# The daemon may still be activating and briefly refuse synchronous status
# requests, see https://github.com/coreos/rpm-ostree/issues/2531
DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_RETRY_PAUSE_SECONDS = 1.0


@dataclass(frozen=True, slots=True)
class InvokerConfig:
    """Command line and retry policy for the status command."""

    command: tuple[str, ...] = DEFAULT_COMMAND
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_pause_seconds: float = DEFAULT_RETRY_PAUSE_SECONDS

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("Status command must not be empty.")


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of one command attempt."""

    exit_code: int
    stdout: bytes
    stderr: bytes

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class StatusCommandInvoker:
    """Run the status command until it exits cleanly or attempts run out."""

    def __init__(
        self,
        config: InvokerConfig | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or InvokerConfig()
        self._sleep = sleep

    def run_once(self) -> CommandResult:
        """Run a single attempt; output pipes are drained and the child reaped."""

        logger.debug("Spawning %s", " ".join(self.config.command))
        try:
            completed = subprocess.run(  # noqa: S603
                list(self.config.command),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                check=False,
            )
        except OSError as error:
            raise SpawnFailure(
                f"failed to spawn 'rpm-ostree status': {error}",
                command=self.config.command,
            ) from error
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    def run(self) -> bytes:
        """Return stdout of the first successful attempt."""

        max_attempts = max(1, self.config.max_attempts)
        attempt = 0
        while True:
            attempt += 1
            result = self.run_once()
            if result.succeeded:
                if attempt > 1:
                    logger.info("Status command succeeded on attempt %d", attempt)
                return result.stdout

            stderr = result.stderr.decode("utf-8", errors="replace")
            logger.warning(
                "Status command attempt %d/%d exited with %d: %s",
                attempt,
                max_attempts,
                result.exit_code,
                stderr.strip(),
            )
            if attempt >= max_attempts:
                raise CommandFailure(
                    f"running 'rpm-ostree status' failed: {stderr}",
                    stderr=stderr,
                    exit_code=result.exit_code,
                    attempts=attempt,
                )
            self._sleep(self.config.retry_pause_seconds)


def run_status_command(
    config: InvokerConfig | None = None,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> bytes:
    """Run the status command with retry and return its raw stdout."""

    return StatusCommandInvoker(config, sleep=sleep).run()
