"""Root conftest — shared fixtures."""

import pytest

from recordkit import errors


@pytest.fixture(autouse=True)
def default_error_sink():
    """Every test starts and ends with the logging sink installed."""
    errors.set_error_sink(None)
    yield
    errors.set_error_sink(None)
