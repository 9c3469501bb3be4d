"""Strict decoding of `rpm-ostree status --json` output."""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from rpmostree_client.errors import DecodeFailure
from rpmostree_client.models import Deployment, Status

MAX_SERIAL = 2**32 - 1


def wire_name(attribute: str) -> str:
    """Map a Python attribute name to its kebab-case wire name."""

    return attribute.replace("_", "-")


def decode_status(payload: bytes | str) -> Status:
    """Deserialize and validate a status payload."""

    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as error:
            raise DecodeFailure(f"status output is not valid UTF-8: {error}") from error
    try:
        raw = json.loads(payload, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as error:
        raise DecodeFailure(f"status output is not valid JSON: {error}") from error
    except RecursionError as error:
        raise DecodeFailure("status output is nested too deeply") from error

    if not isinstance(raw, dict):
        raise DecodeFailure("status output must be a JSON object")
    raw_deployments = raw.get("deployments")
    if not isinstance(raw_deployments, list):
        raise DecodeFailure("status.deployments must be an array")

    deployments: list[Deployment] = []
    for index, item in enumerate(raw_deployments):
        if not isinstance(item, dict):
            raise DecodeFailure(f"deployments[{index}] must be an object")
        deployments.append(_decode_deployment(item, index=index))
    return Status(deployments=tuple(deployments))


def encode_status(status: Status) -> dict[str, Any]:
    """Serialize a status snapshot back to its wire shape."""

    return {
        "deployments": [
            {
                wire_name(attribute.name): getattr(deployment, attribute.name)
                for attribute in fields(Deployment)
            }
            for deployment in status.deployments
        ],
    }


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DecodeFailure(f"status output has duplicate field {key!r}")
        result[key] = value
    return result


def _decode_deployment(item: dict[str, Any], *, index: int) -> Deployment:
    where = f"deployments[{index}]"
    serial = _require(item, "serial", where)
    if isinstance(serial, bool) or not isinstance(serial, int):
        raise DecodeFailure(f"{where}.serial must be an integer")
    if serial < 0 or serial > MAX_SERIAL:
        raise DecodeFailure(f"{where}.serial out of range: {serial}")

    staged = item.get(wire_name("staged"))
    if staged is not None and not isinstance(staged, bool):
        raise DecodeFailure(f"{where}.staged must be a boolean when provided")
    unlocked = item.get(wire_name("unlocked"))
    if unlocked is not None and not isinstance(unlocked, str):
        raise DecodeFailure(f"{where}.unlocked must be a string when provided")

    return Deployment(
        osname=_require_str(item, "osname", where),
        checksum=_require_str(item, "checksum", where),
        origin=_require_str(item, "origin", where),
        serial=serial,
        booted=_require_bool(item, "booted", where),
        pinned=_require_bool(item, "pinned", where),
        staged=staged,
        unlocked=unlocked,
    )


def _require(item: dict[str, Any], attribute: str, where: str) -> Any:
    key = wire_name(attribute)
    if key not in item or item[key] is None:
        raise DecodeFailure(f"{where} is missing required field {key!r}")
    return item[key]


def _require_str(item: dict[str, Any], attribute: str, where: str) -> str:
    value = _require(item, attribute, where)
    if not isinstance(value, str):
        raise DecodeFailure(f"{where}.{wire_name(attribute)} must be a string")
    return value


def _require_bool(item: dict[str, Any], attribute: str, where: str) -> bool:
    value = _require(item, attribute, where)
    if not isinstance(value, bool):
        raise DecodeFailure(f"{where}.{wire_name(attribute)} must be a boolean")
    return value
