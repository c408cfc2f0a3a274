"""Command-line interface for netrcparse."""

import logging
from pathlib import Path

import click

from .errors import NetrcError
from .lookup import find_netrc_path
from .netrc import Machine, Netrc


def _load(netrc_path: Path | None) -> tuple[Path, Netrc]:
    """Resolve, read and parse the netrc file, failing with a CLI error."""
    if netrc_path is None:
        netrc_path = find_netrc_path()

    if not netrc_path.exists():
        raise click.ClickException(f"Netrc file not found: {netrc_path}")

    try:
        return netrc_path, Netrc.from_file(netrc_path)
    except NetrcError as e:
        raise click.ClickException(str(e))


def _mask(password: str | None) -> str:
    if password is None:
        return "-"
    return "*" * len(password)


def _echo_machine(machine: Machine, show_password: bool = False, indent: str = "    "):
    if show_password and machine.password is not None:
        password = machine.password
    else:
        password = _mask(machine.password)
    click.echo(f"{indent}Login:    {machine.login}")
    click.echo(f"{indent}Password: {password}")
    if machine.account is not None:
        click.echo(f"{indent}Account:  {machine.account}")
    if machine.port is not None:
        click.echo(f"{indent}Port:     {machine.port}")


netrc_option = click.option(
    "--netrc",
    "netrc_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to netrc file (default: $NETRC or ~/.netrc)",
)


@click.group()
@click.version_option()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """netrcparse - Inspect .netrc credential files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@netrc_option
def check(netrc_path: Path | None):
    """Parse the netrc file and report errors."""
    path, netrc = _load(netrc_path)

    click.echo(f"{path}: OK")
    click.echo(
        f"{len(netrc.hosts)} hosts, {len(netrc.macros)} macros, "
        f"default: {'yes' if netrc.default is not None else 'no'}"
    )


@main.command()
@netrc_option
def hosts(netrc_path: Path | None):
    """List machine entries (passwords masked)."""
    path, netrc = _load(netrc_path)

    click.echo(f"Reading: {path}")
    click.echo()

    if not netrc.hosts and netrc.default is None:
        click.echo("No machines defined.")
        return

    for host in netrc.hosts:
        click.echo(f"  {host.name}")
        _echo_machine(host.machine)
        click.echo()

    if netrc.default is not None:
        click.echo("  (default)")
        _echo_machine(netrc.default)
        click.echo()


@main.command()
@click.argument("host")
@netrc_option
@click.option(
    "--show-password",
    is_flag=True,
    help="Print the password instead of masking it",
)
def lookup(host: str, netrc_path: Path | None, show_password: bool):
    """Show the credentials used for HOST.

    Falls back to the default entry when HOST has no machine entry.
    """
    _, netrc = _load(netrc_path)

    machine = netrc.find(host)
    if machine is None:
        raise click.ClickException(f"No credentials found for: {host}")

    click.echo(f"  Host: {host}")
    _echo_machine(machine, show_password=show_password, indent="  ")


@main.command()
@click.argument("name", required=False)
@netrc_option
def macros(name: str | None, netrc_path: Path | None):
    """List macro names, or print the body of macro NAME."""
    _, netrc = _load(netrc_path)

    if name:
        macro = netrc.find_macro(name)
        if macro is None:
            raise click.ClickException(f"No macro named: {name}")
        click.echo(macro.body, nl=False)
        return

    if not netrc.macros:
        click.echo("No macros defined.")
        return

    for macro in netrc.macros:
        click.echo(f"  {macro.name}")


if __name__ == "__main__":
    main()
