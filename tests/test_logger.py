import logging

from slimcommons.logger.logger import get_logger, logger, setup_logger
from slimcommons.functional.rotation import swap


def test_project_logger_configured_once():
    first = setup_logger()
    second = setup_logger(level="DEBUG")
    assert first is second is logger
    # Count only the handler installed here; pytest adds its own capture handlers
    assert sum(type(h) is logging.StreamHandler for h in logger.handlers) == 1
    assert logger.propagate is False


def test_get_logger_nests_under_project():
    assert get_logger("slimcommons.functional.rotation").name == (
        "slimcommons.functional.rotation"
    )
    assert get_logger("plugins").name == "slimcommons.plugins"


def test_noop_is_logged_at_debug(caplog):
    rotation_logger = logging.getLogger("slimcommons.functional.rotation")
    caplog.set_level(logging.DEBUG, logger="slimcommons.functional.rotation")
    rotation_logger.addHandler(caplog.handler)
    try:
        swap([1, 2], 0, 5)
    finally:
        rotation_logger.removeHandler(caplog.handler)
    assert any("swap ignored" in record.getMessage() for record in caplog.records)
