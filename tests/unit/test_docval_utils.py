"""Unit tests for docval.utils."""

import logging

from docval.utils import configure_logging, get_logger


def test_get_logger_namespace():
    assert get_logger("docs.loader").name == "docval.docs.loader"


def test_configure_logging_installs_handlers_once(tmp_path):
    log_file = tmp_path / "logs" / "docval.log"
    configure_logging("INFO", log_file)
    root_logger = logging.getLogger("docval")
    handler_count = len(root_logger.handlers)
    assert root_logger.level == logging.INFO

    configure_logging("ERROR")
    assert root_logger.level == logging.ERROR
    assert len(root_logger.handlers) == handler_count

    configure_logging("NOT-A-LEVEL")
    assert root_logger.level == logging.WARNING
