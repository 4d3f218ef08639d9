"""Shared pytest configuration for the filestructure test suite."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: performance tests excluded by run_tests.py")
