import io
from collections.abc import Callable

import pytest

from tinyc.tinyc_interpreter import Interpreter


@pytest.fixture  # type: ignore[misc]
def run() -> Callable[[str], tuple[str, Interpreter]]:
    """Runs a complete program and returns its output with the finished interpreter."""

    def _run(source: str) -> tuple[str, Interpreter]:
        out = io.StringIO()
        interpreter = Interpreter(source, stdout=out)
        interpreter.parse()
        return out.getvalue(), interpreter

    return _run
