"""Pytest configuration for the stockwatch test suite."""

from __future__ import annotations

import pytest

from stockwatch.core.data import WatchlistStorage


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--stockwatch-run-integration",
        action="store_true",
        default=False,
        help="Run stockwatch integration tests that hit the live quote provider.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker for stockwatch tests."""

    config.addinivalue_line(
        "markers",
        "integration: marks stockwatch tests requiring network access",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--stockwatch-run-integration"):
        return

    skip_integration = pytest.mark.skip(
        reason="integration tests require --stockwatch-run-integration",
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def storage(tmp_path) -> WatchlistStorage:
    return WatchlistStorage(tmp_path / "stocks.json")


def _raw_record(**overrides):
    record = {
        "f2": 123000,
        "f3": 250,
        "f4": 500,
        "f5": 1000,
        "f6": 2000000.0,
        "f7": 300,
        "f8": 150,
        "f9": 200,
        "f10": 110,
        "f11": 120,
        "f12": "00700",
        "f13": 116,
        "f14": "腾讯控股",
        "f15": 124000,
        "f16": 122000,
        "f17": 121000,
        "f18": 120000,
        "f20": 3000000000.0,
        "f21": 2500000000.0,
        "f22": 80,
        "f23": 90,
        "f24": 100,
        "f25": 200,
    }
    record.update(overrides)
    return record


@pytest.fixture
def raw_record():
    """Factory for field-coded Eastmoney records with every consumed field present."""
    return _raw_record
