"""
Unit tests for the shared logging setup.
"""
import logging

import pytest

from threebody.logging_config import LOG_LEVELS, configure_logging


@pytest.fixture
def root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


@pytest.mark.parametrize("name", LOG_LEVELS)
def test_sets_root_level(root_level, name: str) -> None:
    configure_logging(name)
    assert root_level.level == getattr(logging, name.upper())


def test_case_insensitive(root_level) -> None:
    configure_logging("WARNING")
    assert root_level.level == logging.WARNING


def test_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level 'loud'"):
        configure_logging("loud")
