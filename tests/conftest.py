import logging

import pytest

from services.logging_config import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _reset_diagnostics_logger():
    # CLI tests call setup_logging(); undo it so caplog sees records again
    logger = logging.getLogger(ROOT_LOGGER)
    yield
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
