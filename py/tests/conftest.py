import pytest

from barista.logs import disable_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    yield
    disable_logging()
