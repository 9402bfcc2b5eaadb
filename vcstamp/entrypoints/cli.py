"""vcstamp CLI entrypoint.

Prints a one-line version stamp for a file::

    $ vcstamp src/main.c
    'ref:3f2c...e1 status:Modified blob:9ab0...42'

The stamp goes to standard output, FATAL/WARNING diagnostics to standard
error. Exit code 1 is reserved for usage errors and failed preconditions;
an unknown version-control state still exits 0.
"""

import logging
from pathlib import Path
from typing import NoReturn

import click

from vcstamp.adapters.fs import LocalFileSystem
from vcstamp.adapters.git_cmd import GitProvider
from vcstamp.core.stamp import StampRequest, StampResponse, StampUseCase
from vcstamp.domain.config import StampConfig
from vcstamp.version import __version__

logger = logging.getLogger(__name__)

PROG_NAME = "vcstamp"


def _usage_exit(ctx: click.Context, exit_code: int) -> NoReturn:
    """Print the usage line to standard error and exit."""
    click.echo(f"usage: {ctx.info_name or PROG_NAME} <file>", err=True)
    ctx.exit(exit_code)


class StampCommand(click.Command):
    """Command that reports unrecognized options with the plain usage line.

    click exits with code 2 and its own message on a usage error; vcstamp
    prints ``usage: vcstamp <file>`` and exits 1 instead.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            logger.debug("Rejected arguments %s: %s", args, e.format_message())
            _usage_exit(ctx, 1)


def _show_help(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    _usage_exit(ctx, 0)


def _create_stamp_usecase(config: StampConfig) -> StampUseCase:
    """Create stamp use case wired to git and the local file system."""
    return StampUseCase(GitProvider(config), LocalFileSystem())


def _emit(response: StampResponse, config: StampConfig) -> None:
    """Write the stamp to stdout and diagnostics to stderr."""
    click.echo(response.stamp.render(config.quote))
    for diagnostic in response.diagnostics:
        click.echo(str(diagnostic), err=True)


@click.command(name=PROG_NAME, cls=StampCommand, add_help_option=False)
@click.option(
    "-h",
    "help_",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_show_help,
    help="Print usage and exit.",
)
@click.argument("paths", nargs=-1)
@click.pass_context
def cli(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Print the version-control stamp of a single file."""
    if len(paths) != 1:
        _usage_exit(ctx, 1)

    logger.debug("vcstamp %s stamping %s", __version__, paths[0])
    config = StampConfig.default()
    response = _create_stamp_usecase(config).execute(StampRequest(path=Path(paths[0])))
    _emit(response, config)
    ctx.exit(response.exit_code)


def main() -> None:
    """Main entrypoint for the CLI."""
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
