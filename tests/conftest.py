"""Shared pytest configuration for the TreeListLib test suite."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running tests, skipped by run_tests.py unless --all"
    )
