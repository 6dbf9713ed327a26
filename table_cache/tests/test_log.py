import logging

from table_cache.modules.log import ROOT_LOGGER, setup_logging


def test_setup_logging_is_idempotent():
    logger = setup_logging(logging.INFO)
    count = len(logger.handlers)
    again = setup_logging(logging.DEBUG)
    assert again is logger
    assert len(again.handlers) == count
    assert again.level == logging.DEBUG


def test_setup_logging_targets_package_logger():
    logger = setup_logging(logging.WARNING)
    assert logger.name == ROOT_LOGGER
    assert logging.getLogger("table_cache.modules.cache").getEffectiveLevel() == logging.WARNING
