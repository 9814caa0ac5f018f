import logging

import click

from sshkm import __version__
from sshkm.core.console import raw


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="sshkm")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """sshkm — manage SSH keys in ~/.ssh and their host mappings in ~/.ssh/config."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s")
    if ctx.invoked_subcommand is None:
        raw(ctx.get_help())


@cli.command("help")
@click.pass_context
def help_(ctx: click.Context) -> None:
    """Show the available commands."""
    raw(ctx.find_root().get_help())


# Register commands
from sshkm.commands.audit import audit, unused  # noqa: E402
from sshkm.commands.hosts import map_, show_config, unmap  # noqa: E402
from sshkm.commands.keys import delete, generate, list_keys  # noqa: E402

cli.add_command(list_keys)
cli.add_command(show_config)
cli.add_command(unused)
cli.add_command(map_)
cli.add_command(unmap)
cli.add_command(generate)
cli.add_command(delete)
cli.add_command(audit)

if __name__ == "__main__":
    cli()
