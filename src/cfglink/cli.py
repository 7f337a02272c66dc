from typing import List, NoReturn, Optional, Tuple

import click

from cfglink import __version__
from cfglink import report
from cfglink.config import Config
from cfglink.errors import TraversalError
from cfglink.symlinkmirror import link_mirror

EPILOG = """
\b
Environment variables:
  DRY_RUN          Set to 'true' for dry-run mode (default: false)
  VERBOSE          Set to 'false' for quiet mode (default: true)
  CFGLINK_SOURCE   Directory to publish (default: current directory)
  CFGLINK_TARGET   Directory receiving the links (default: ~/.config/zellij)

\b
Examples:
  cfglink              # normal run
  cfglink --dry-run    # show what would be linked
"""


def _usage_error(ctx: click.Context, message: str) -> NoReturn:
    report.error(message)
    click.echo(ctx.get_help())
    ctx.exit(1)


class LinkCommand(click.Command):
    """Reports usage errors with the full help text and exit code 1"""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            _usage_error(ctx, e.format_message())


@click.command(cls=LinkCommand, epilog=EPILOG, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("-d", "--dry-run", is_flag=True, default=False, help="Show what would be done without making changes")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Suppress verbose output")
@click.option("-s", "--source", default=None, help="Directory to publish, overrides CFGLINK_SOURCE")
@click.option("-t", "--target", default=None, help="Directory receiving the links, overrides CFGLINK_TARGET")
@click.option("-e", "--exclude", multiple=True, help="Extra file or directory name to skip, may be repeated")
@click.option("--show-config", is_flag=True, default=False, help="Print the effective configuration and exit")
@click.pass_context
def cli(
    ctx: click.Context,
    dry_run: bool,
    quiet: bool,
    source: Optional[str],
    target: Optional[str],
    exclude: Tuple[str, ...],
    show_config: bool,
) -> None:
    """
    Link config files from a directory into ~/.config/zellij/, mirroring its layout with symbolic links.
    """

    try:
        config = Config().with_flags(dry_run=dry_run, quiet=quiet, source=source, target=target, exclude=exclude)
    except ValueError as e:
        _usage_error(ctx, str(e))

    if show_config:
        click.echo(config)
        return

    try:
        summary = link_mirror(config)
    except TraversalError as e:
        report.error(str(e))
        report.error("Config linking aborted")
        ctx.exit(1)

    if summary.ok:
        report.success("Config linking completed successfully!")
    else:
        report.error("Config linking completed with errors")
        ctx.exit(1)
