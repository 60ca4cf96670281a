from collections.abc import Iterator

import pytest

from genius.util.log import Log


@pytest.fixture(autouse=True)
def _log_teardown() -> Iterator[None]:
    yield
    Log.reset()
