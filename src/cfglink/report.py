"""Console output for a link run. Colours are dropped by click when stdout is not a terminal."""

import click

RULE = "=" * 40


def info(message: str, verbose: bool = True) -> None:
    if verbose:
        click.echo(f"{click.style('[INFO]', fg='blue')} {message}")


def success(message: str) -> None:
    click.echo(f"{click.style('[SUCCESS]', fg='green')} {message}")


def error(message: str) -> None:
    click.echo(f"{click.style('[ERROR]', fg='red')} {message}", err=True)


def summary(processed: int, linked: int, failed: int, dry_run: bool) -> None:
    """Prints the closing summary block"""

    click.echo("")
    click.echo(RULE)
    if dry_run:
        click.secho("DRY RUN MODE - No changes made", fg="blue")
    click.echo(f"Total processed: {processed}")
    click.echo(f"  - Linked: {linked}")
    click.echo(f"  - Failed: {failed}")
    click.echo(RULE)
