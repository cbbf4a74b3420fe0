from sdunit.parse import ParseError, parse, parse_service, parse_target
from sdunit.unit import ParseErrorType, UnitFile, UnitType

__all__ = [
    'ParseError',
    'ParseErrorType',
    'UnitFile',
    'UnitType',
    'parse',
    'parse_service',
    'parse_target',
]
