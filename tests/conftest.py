# tests/conftest.py
"""
Shared fixtures: pages with known margins and a constant-width measurer.
"""

from __future__ import annotations

import pytest

from logger import reset_error_tracking
from models import Units
from page import Page


@pytest.fixture(autouse=True)
def _clean_error_tracking():
    reset_error_tracking()
    yield
    reset_error_tracking()


@pytest.fixture
def cm_page() -> Page:
    """A4 page in centimeters with a 2.5 cm margin on every side."""
    page = Page("A4", Units.CENTIMETER)
    page.set_all_margins(2.5)
    return page


@pytest.fixture
def mono():
    """Measurer giving every character a width of 1."""
    return lambda text: float(len(text))
