import logging

import pytest

import config
from logging_config import setup_logging
from motion.projection import intended_endpoint
from motion.spring import DampedHarmonicSpring


@pytest.fixture
def motion_logger():
    logger = logging.getLogger("motion")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)


def test_setup_logging_writes_file(motion_logger, tmp_path):
    log_file = tmp_path / "motion.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    assert logger is motion_logger
    assert len(logger.handlers) == 2

    logging.getLogger("motion.spring").debug("hello from spring")
    for handler in logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "motion.spring - DEBUG - hello from spring" in text


def test_setup_logging_does_not_duplicate_handlers(motion_logger):
    setup_logging()
    setup_logging()
    assert len(motion_logger.handlers) == 1


def test_displacement_is_logged(caplog):
    spring = DampedHarmonicSpring.from_preset(config.SpringPreset.PictureInPicture)
    with caplog.at_level(logging.DEBUG, logger="motion.spring"):
        spring.relative_velocity(10.0, 0.0, 0.0, epsilon=0.001)
        spring.relative_velocity(1e-8, 0.0, 0.0, epsilon=0.001)
    messages = [r.getMessage() for r in caplog.records]
    assert any("displaced" in m for m in messages)
    assert any("negligible" in m for m in messages)


def test_chosen_endpoint_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="motion.projection"):
        intended_endpoint((0.0, 0.0), (0.1, 0.1), [(0.0, 0.0), (1.0, 1.0)])
    assert any("endpoint 0" in r.getMessage() for r in caplog.records)
