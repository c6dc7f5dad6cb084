import pytest
import structlog

from bank_account.logs import configure_logging


@pytest.fixture(scope='session', autouse=True)
def structured_logging():
    configure_logging()
    yield
    structlog.reset_defaults()
