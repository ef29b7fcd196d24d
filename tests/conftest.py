import pytest

from prefix_expression import logging_system


@pytest.fixture(autouse=True)
def reset_global_logger():
    yield
    if logging_system._global_logger is not None:
        logging_system._global_logger.close()
    logging_system._global_logger = None
