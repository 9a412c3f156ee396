"""Pytest configuration and fixtures."""

import logging

import pytest

from verity.assertions import reset_count
from verity.comparator import ComparatorFactory
from verity.events import reset_emitter


@pytest.fixture(autouse=True)
def reset_global_state():
    """Start every test with a zero count, a bare emitter and no custom comparators."""
    reset_count()
    reset_emitter()
    ComparatorFactory.default().reset()
    yield
    ComparatorFactory.default().reset()


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Close handlers added to verity loggers (e.g. by --debug-log) after each test."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name == "verity" or name.startswith("verity.")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


SAMPLE_SUITE = """
version: 1
name: Sample
env:
  HOST: example.com
checks:
  - id: status
    value: 200
    expect:
      op: equals
      value: 200
  - id: range
    value: 7
    expect:
      all_of:
        - op: greater_than
          value: 0
        - op: less_than
          value: 10
  - id: url
    value: "https://{{env.HOST}}/api"
    expect:
      op: string_starts_with
      value: "https://example.com"
"""


FAILING_SUITE = """
version: 1
name: Failing
checks:
  - id: wrong_status
    value: 500
    message: status code
    expect:
      op: equals
      value: 200
  - id: ok
    value: [1, 2]
    expect:
      op: count
      value: 2
"""


@pytest.fixture
def sample_suite_yaml():
    return SAMPLE_SUITE


@pytest.fixture
def failing_suite_yaml():
    return FAILING_SUITE


@pytest.fixture
def suite_file(tmp_path):
    path = tmp_path / "suite.yaml"
    path.write_text(SAMPLE_SUITE)
    return path


@pytest.fixture
def failing_suite_file(tmp_path):
    path = tmp_path / "failing.yaml"
    path.write_text(FAILING_SUITE)
    return path
