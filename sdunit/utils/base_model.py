import inspect
import re
from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict

_SECTION_HEADER = re.compile(r'^[A-Z][a-z]+:\s*$')
_FIELD_LINE = re.compile(r'^(\w+):\s*(.*)$')


def parse_docstring_args(docstring: str | None) -> dict[str, str]:
    """Extract ``name: description`` pairs from a Google style Args block.

    Continuation lines are folded into the preceding entry. The block ends
    at a blank line or at the next section header (``Returns:`` etc.).
    """
    if not docstring:
        return {}

    descriptions: dict[str, list[str]] = {}
    current: str | None = None
    in_args = False

    for raw_line in inspect.cleandoc(docstring).splitlines():
        line = raw_line.strip()

        if not in_args:
            in_args = line == 'Args:'
            continue
        if not line or _SECTION_HEADER.match(line):
            break

        field_match = _FIELD_LINE.match(line)
        if field_match and raw_line.startswith(' ' * 4) \
            and not raw_line.startswith(' ' * 8):
            current = field_match.group(1)
            descriptions[current] = [field_match.group(2).strip()]
        elif current:
            descriptions[current].append(line)

    return {
        name: ' '.join(part for part in parts if part)
        for name, parts in descriptions.items()
    }


class BaseModel(PydanticBaseModel):
    """Frozen record base.

    Subclasses document their fields in an Args block; the text becomes the
    field description unless the field declares one explicitly.
    """
    model_config = ConfigDict(frozen=True)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        for name, text in parse_docstring_args(cls.__doc__).items():
            field_info = cls.model_fields.get(name)
            if field_info is not None and field_info.description is None \
                and text:
                field_info.description = text
