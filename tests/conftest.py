"""Shared pytest fixtures for rpn_calc tests."""

import pytest


@pytest.fixture
def variables() -> dict:
    """Return the variables and functions used by the binding tests."""
    return {
        "π": 3.14,
        "life": 42,
        "inc": lambda x: x + 1,
        "sqdist": lambda x, y: x * x + y * y,
    }
