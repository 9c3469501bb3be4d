"""Query-and-decode entry points."""

from __future__ import annotations

from rpmostree_client.decoder import decode_status
from rpmostree_client.errors import DecodeFailure, Error, StatusQueryError
from rpmostree_client.invoker import StatusCommandInvoker
from rpmostree_client.models import Status


def fetch_status(invoker: StatusCommandInvoker | None = None) -> Status:
    """Gather a snapshot of the system status.

    Raises `SpawnFailure`, `CommandFailure` or `DecodeFailure`.
    """

    stdout = (invoker or StatusCommandInvoker()).run()
    try:
        return decode_status(stdout)
    except DecodeFailure as error:
        raise DecodeFailure(f"failed to parse 'rpm-ostree status' output: {error}") from error


def query_status(invoker: StatusCommandInvoker | None = None) -> Status:
    """Gather a snapshot of the system status, collapsing failures into `Error`."""

    try:
        return fetch_status(invoker)
    except StatusQueryError as error:
        raise Error(str(error)) from error
