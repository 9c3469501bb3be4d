"""Controller for status CLI commands."""

from __future__ import annotations

import json
from dataclasses import dataclass

from rpmostree_client.client import query_status
from rpmostree_client.config import ClientSettings
from rpmostree_client.decoder import encode_status
from rpmostree_client.invoker import StatusCommandInvoker


@dataclass(slots=True)
class StatusCommand:
    """CLI inputs for status command."""

    as_json: bool = False


class StatusCliController:
    """Coordinates status command execution."""

    def run_status(self, command: StatusCommand) -> list[str]:
        settings = ClientSettings.from_env()
        settings.validate()
        status = query_status(StatusCommandInvoker(settings.to_invoker_config()))

        if command.as_json:
            return [json.dumps(encode_status(status), ensure_ascii=False, indent=2)]
        lines: list[str] = []
        for deployment in status.deployments:
            booted_star = "* " if deployment.booted else ""
            lines.append(f"{booted_star}Commit: {deployment.checksum}")
        return lines
