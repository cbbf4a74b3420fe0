import click

from sdunit.parse import ParseError, detect_unit_type, parse
from sdunit.unit import UnitFile, UnitType


def format_unit_summary(unit_file: UnitFile) -> str:
    """Format the non-default attributes of a parsed unit, one per line.
    """
    lines = [f'{unit_file.path}: ok ({unit_file.unit_type.value})']

    for label, record in (
        ('Unit', unit_file.unit),
        ('Install', unit_file.install),
        (unit_file.unit_type.value, unit_file.section),
    ):
        for name, field_info in type(record).model_fields.items():
            value = getattr(record, name)
            if name == 'unit_type' or value == field_info.default:
                continue
            description = field_info.description or name
            lines.append(f'  [{label}] {description}: {value}')

    return '\n'.join(lines)


@click.command('verify')
@click.argument('path', type=click.Path(dir_okay=False))
@click.option(
    '--type',
    'unit_type',
    type=click.Choice([unit_type.value for unit_type in UnitType]),
    default=None,
    help='Expected unit type (default: taken from the file extension).',
)
@click.option(
    '--json',
    'as_json',
    is_flag=True,
    help='Print the parsed unit as JSON.',
)
@click.option(
    '--details',
    is_flag=True,
    help='List every attribute that differs from its default.',
)
def verify(
    path: str,
    unit_type: str | None,
    as_json: bool,
    details: bool,
) -> None:
    """Parse a unit file and report the first error, if any.
    """
    try:
        expected = UnitType(unit_type) if unit_type \
            else detect_unit_type(path)
        unit_file = parse(path, expected)
    except ParseError as e:
        click.echo(f'Error: {e}', err=True)
        raise click.exceptions.Exit(1)

    if as_json:
        click.echo(unit_file.model_dump_json(indent=2))
    elif details:
        click.echo(format_unit_summary(unit_file))
    else:
        click.echo(f'{unit_file.path}: ok ({unit_file.unit_type.value})')
