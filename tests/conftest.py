"""Shared test fixtures."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

_EXAMPLE_STATUS_JSON = json.dumps(
    {
        "deployments": [
            {
                "unlocked": None,
                "osname": "fedora",
                "pinned": False,
                "checksum": "abc123",
                "staged": None,
                "booted": True,
                "serial": 0,
                "origin": "fedora:fedora/36/x86_64/silverblue",
            },
        ],
    },
)

_FAKE_RPM_OSTREE_SCRIPT = """\
import pathlib
import sys

counter = pathlib.Path({counter!r})
attempt = int(counter.read_text()) + 1 if counter.exists() else 1
counter.write_text(str(attempt))
if {fail_times} < 0 or attempt <= {fail_times}:
    sys.stderr.write("error: daemon not ready (attempt %d)\\n" % attempt)
    sys.exit({exit_code})
sys.stdout.write({stdout!r})
"""


@dataclass(slots=True)
class FakeRpmOstree:
    """Fake status command backed by a script and an attempt counter file."""

    command: tuple[str, ...]
    counter_path: Path

    @property
    def attempts(self) -> int:
        if not self.counter_path.exists():
            return 0
        return int(self.counter_path.read_text())


@pytest.fixture()
def fake_rpm_ostree(tmp_path: Path) -> Callable[..., FakeRpmOstree]:
    """Build a fake `rpm-ostree` failing `fail_times` times (-1 means always)."""

    def _build(
        *,
        fail_times: int = 0,
        stdout: str = _EXAMPLE_STATUS_JSON,
        exit_code: int = 1,
    ) -> FakeRpmOstree:
        script = tmp_path / "fake_rpm_ostree.py"
        counter = tmp_path / "attempts.txt"
        script.write_text(
            _FAKE_RPM_OSTREE_SCRIPT.format(
                counter=str(counter),
                fail_times=fail_times,
                exit_code=exit_code,
                stdout=stdout,
            ),
            "utf-8",
        )
        return FakeRpmOstree(
            command=(sys.executable, str(script), "status", "--json"),
            counter_path=counter,
        )

    return _build


@pytest.fixture()
def example_status_json() -> str:
    """Status payload with one booted deployment and null optionals."""
    return _EXAMPLE_STATUS_JSON
