import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # the CLI configures the package logger, undo it between tests
    logger = logging.getLogger("unmtk")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
