import logging
from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError

from aws_messaging.config import configure_logging


@pytest.fixture(scope="session", autouse=True)
def structured_logging():
    """Configure structlog before any helper logger is first used."""
    configure_logging()


@pytest.fixture
def restore_root_logging():
    """Put the root logger's handlers and level back after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def mock_boto_client():
    """Patch boto3.client and hand back the mock client it returns."""
    with patch("boto3.client") as factory:
        client = Mock()
        factory.return_value = client
        yield factory


@pytest.fixture
def client_error():
    """Build a botocore ClientError for the given code and operation."""

    def _make(code: str, operation: str) -> ClientError:
        return ClientError(
            {"Error": {"Code": code, "Message": f"{code} raised"}},
            operation,
        )

    return _make
