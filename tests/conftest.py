import pytest

from parsley.context import Context
from parsley.printer import to_write


@pytest.fixture
def ctx():
    return Context.base().math()


@pytest.fixture
def run(ctx):
    """Evaluate source in a fresh base context and return the written result."""

    def _run(source: str) -> str:
        return to_write(ctx.run(source))

    return _run
