"""Value objects for the rpm-ostree client-side state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Deployment:
    """A single deployment, i.e. a bootable ostree commit."""

    osname: str
    checksum: str
    origin: str
    serial: int
    booted: bool
    pinned: bool
    staged: bool | None = None
    unlocked: str | None = None


@dataclass(frozen=True, slots=True)
class Status:
    """Snapshot parsed from `rpm-ostree status --json`.

    Deployments keep the order reported by the command.
    """

    deployments: tuple[Deployment, ...] = ()

    def booted_deployment(self) -> Deployment | None:
        """Return the first deployment marked as booted, if any."""

        for deployment in self.deployments:
            if deployment.booted:
                return deployment
        return None

    def staged_deployment(self) -> Deployment | None:
        """Return the first deployment known to be staged, if any."""

        for deployment in self.deployments:
            if deployment.staged is True:
                return deployment
        return None
