import logging

import pytest


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def debug_messages():
    """Collect DEBUG messages from the loscore logger, which does not propagate."""
    logger = logging.getLogger("loscore")
    handler = ListHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield lambda: [record.getMessage() for record in handler.records]

    logger.removeHandler(handler)
    logger.setLevel(previous_level)
