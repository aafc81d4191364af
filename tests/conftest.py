"""Shared pytest configuration for TreeWalker tests."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, excluded by run_tests.py unless --all")
