from typing import Self

from sdunit.unit.types import ParseErrorType


class ParseError(Exception):
    """Unit file parse failure.

    Errors raised by value converters and section handlers carry only a
    kind and a message. The parser stamps the file path and 1-based line
    number before the error reaches the caller; file level failures use
    line 0.
    """

    def __init__(
        self,
        kind: ParseErrorType,
        message: str = '',
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.file = file
        self.line = line
        super().__init__(str(self))

    @property
    def located(self) -> bool:
        return self.file is not None and self.line is not None

    def at(self, file: str, line: int) -> Self:
        """Return a copy of this error stamped with file and line.
        """
        return type(self)(self.kind, self.message, file, line)

    def __str__(self) -> str:
        text = self.kind.value
        if self.message:
            text = f'{text}: {self.message}'
        if self.file is not None:
            text = f'{self.file}:{self.line or 0}: {text}'
        return text

    def __repr__(self) -> str:
        return (
            f'{type(self).__name__}(kind={self.kind.value!r}, '
            f'file={self.file!r}, line={self.line!r}, '
            f'message={self.message!r})'
        )
