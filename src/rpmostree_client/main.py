"""CLI entrypoint for rpmostree-client."""

import logging

import rich_click as click

from rpmostree_client import __version__
from rpmostree_client.controllers import StatusCliController, StatusCommand
from rpmostree_client.errors import Error

STATUS_CONTROLLER = StatusCliController()


@click.group()
@click.version_option(version=__version__, prog_name="rpmostree-client")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def rpmostree_client(verbose: bool) -> None:
    """Read-only rpm-ostree status client."""

    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@rpmostree_client.command("status")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print decoded JSON.")
def status(as_json: bool) -> None:
    """Show deployments, marking the booted one with `*`."""

    try:
        lines = STATUS_CONTROLLER.run_status(StatusCommand(as_json=as_json))
    except (Error, ValueError) as error:
        raise click.ClickException(str(error)) from error
    _emit_lines(lines)


def _emit_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    rpmostree_client()
