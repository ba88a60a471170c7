import io
import logging

import pytest
from rasterkit.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_setup_is_idempotent(package_logger):
    setup_logging("DEBUG", stream=io.StringIO())
    setup_logging("DEBUG", stream=io.StringIO())
    owned = [h for h in package_logger.handlers if getattr(h, "_rasterkit_handler", False)]
    assert len(owned) == 1
    assert package_logger.level == logging.DEBUG


def test_records_are_formatted(package_logger):
    stream = io.StringIO()
    setup_logging(logging.INFO, stream=stream)
    get_logger("gradients.radial").info("hello %s", "there")
    line = stream.getvalue().strip()
    assert line.endswith("| INFO | rasterkit.gradients.radial | hello there")
    assert "+00:00" in line


def test_unknown_level(package_logger):
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_get_logger_namespacing():
    assert get_logger("rasterkit.image").name == "rasterkit.image"
    assert get_logger("font").name == "rasterkit.font"
    assert get_logger("rasterkit").name == "rasterkit"
