import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    # The CLI replaces loguru sinks with ones bound to the captured stderr.
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
