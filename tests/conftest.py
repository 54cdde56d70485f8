from __future__ import annotations

import logging

import pytest

from feature_tour.console import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo ``setup_logging`` so caplog sees records in every test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
