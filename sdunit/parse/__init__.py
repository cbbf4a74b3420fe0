from sdunit.parse.errors import ParseError
from sdunit.parse.parser import (
    UnitParser,
    parse,
    parse_service,
    parse_target,
)
from sdunit.parse.quantity import parse_duration, parse_size
from sdunit.parse.reader import detect_unit_type, get_unit_reader

__all__ = [
    'ParseError',
    'UnitParser',
    'detect_unit_type',
    'get_unit_reader',
    'parse',
    'parse_duration',
    'parse_service',
    'parse_size',
    'parse_target',
]
