"""
Unit tests -- package logger hierarchy and opt-in output.
"""
import io
import logging

import pytest

from weaviate_gql.core.logging import PACKAGE_LOGGER, configure_logging, get_logger


@pytest.fixture
def package_logger():
    root = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_module_loggers_nest_under_package():
    assert get_logger("weaviate_gql.transport.executor").name == "weaviate_gql.transport.executor"
    assert get_logger("myapp").name == "weaviate_gql.myapp"
    assert get_logger(PACKAGE_LOGGER).name == PACKAGE_LOGGER


def test_quiet_until_configured(package_logger):
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)
    assert not any(getattr(h, "_weaviate_gql", False) for h in package_logger.handlers)


def test_configure_logging_writes_pipe_format(package_logger):
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)
    get_logger("weaviate_gql.client.query_service").debug("GraphQL Get | query_len=%d", 42)

    line = stream.getvalue().strip()
    assert "| DEBUG    | weaviate_gql.client.query_service | GraphQL Get | query_len=42" in line


def test_configure_logging_replaces_its_handler(package_logger):
    configure_logging("INFO", stream=io.StringIO())
    configure_logging("WARNING", stream=io.StringIO())
    ours = [h for h in package_logger.handlers if getattr(h, "_weaviate_gql", False)]
    assert len(ours) == 1
    assert package_logger.level == logging.WARNING
