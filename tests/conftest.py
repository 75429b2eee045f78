"""Shared fixtures."""

import pytest

from scopecss.naming import reset_counter


@pytest.fixture(autouse=True)
def _fresh_class_name_counter():
    reset_counter()
    yield
    reset_counter()
