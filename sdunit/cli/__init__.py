import click

from sdunit.cli.commands.tables import tables
from sdunit.cli.commands.verify import verify
from sdunit.config import setup_logger


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log debug messages.')
@click.option(
    '--journal',
    is_flag=True,
    help='Log to the systemd journal (needs systemd-python).',
)
def cli(verbose: bool, journal: bool) -> None:
    """sdunit - Parse systemd unit files.
    """
    setup_logger(verbose=verbose, journal=journal)


cli.add_command(verify)
cli.add_command(tables)


def run_cli() -> None:
    """Run the CLI interface.
    """
    cli()


__all__ = [
    'cli',
    'run_cli',
]
