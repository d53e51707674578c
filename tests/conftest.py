from collections.abc import Iterator

import pytest

from docpath.testing import docpath_test_env


@pytest.fixture
def docpath_env() -> Iterator[None]:
    with docpath_test_env():
        yield
