import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_unit(tmp_path: Path) -> Callable[[str, str], str]:
    """Write a unit file into tmp_path and return its path.
    """
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content).lstrip('\n'), encoding='utf-8')
        return str(path)

    return _write
