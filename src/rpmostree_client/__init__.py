"""APIs for read-only introspection of rpm-ostree client-side state."""

from rpmostree_client.client import fetch_status, query_status
from rpmostree_client.decoder import decode_status, encode_status
from rpmostree_client.errors import (
    CommandFailure,
    DecodeFailure,
    Error,
    SpawnFailure,
    StatusQueryError,
)
from rpmostree_client.invoker import InvokerConfig, StatusCommandInvoker, run_status_command
from rpmostree_client.models import Deployment, Status

__version__ = "0.1.0"

__all__ = [
    "CommandFailure",
    "DecodeFailure",
    "Deployment",
    "Error",
    "InvokerConfig",
    "SpawnFailure",
    "Status",
    "StatusCommandInvoker",
    "StatusQueryError",
    "__version__",
    "decode_status",
    "encode_status",
    "fetch_status",
    "query_status",
    "run_status_command",
]
