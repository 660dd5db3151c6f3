"""
Pytest configuration.

Registers the integration marker and shared fixtures for the extraction and
API tests.
"""

from datetime import datetime

import pytest

from billscan.core.config import settings
from billscan.services.storage import bill_store


def pytest_addoption(parser):
    """Add custom command-line options"""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against real Azure resources"
    )


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test requiring real Azure resources"
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is specified"""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


FIXED_NOW = datetime(2024, 1, 7, 9, 30)


@pytest.fixture
def fixed_clock():
    """Clock frozen at 2024-01-07 for the date fallback"""
    return lambda: FIXED_NOW


@pytest.fixture
def mock_ocr(monkeypatch):
    """Disable Azure DI so the API falls back to the mock OCR engine"""
    monkeypatch.setattr(settings, "az_di_endpoint", None)
    monkeypatch.setattr(settings, "az_di_api_key", None)


@pytest.fixture
def empty_bill_store():
    bill_store.clear()
    yield bill_store
    bill_store.clear()
