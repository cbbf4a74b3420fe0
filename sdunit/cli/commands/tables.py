from collections.abc import Mapping

import click

from sdunit.parse.tables import BASE_IEC, BASE_SI, SEC_UNIT_TABLE

TABLES: dict[str, Mapping[str, int]] = {
    'iec': BASE_IEC,
    'si': BASE_SI,
    'duration': SEC_UNIT_TABLE,
}


def format_table(table: Mapping[str, int]) -> str:
    """Format a suffix table, largest multiplier first.
    """
    rows = sorted(table.items(), key=lambda item: (-item[1], item[0]))
    width = max(len('SUFFIX'), max(len(repr(suffix)) for suffix, _ in rows))

    lines = [f'{"SUFFIX":<{width}} MULTIPLIER']
    for suffix, multiplier in rows:
        lines.append(f'{suffix!r:<{width}} {multiplier}')
    return '\n'.join(lines)


@click.command('tables')
@click.argument(
    'name',
    type=click.Choice(sorted(TABLES)),
    default='duration',
)
def tables(name: str) -> None:
    """Show a byte or duration suffix table.
    """
    click.echo(format_table(TABLES[name]))
