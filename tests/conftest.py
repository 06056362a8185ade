import logging
import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)
