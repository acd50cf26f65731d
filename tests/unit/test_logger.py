import logging

from shortcut_crx.logger import get_logger, set_package_level


def test_get_logger_returns_configured_logger():
    logger = get_logger("shortcut_crx.tests.sample")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "shortcut_crx.tests.sample"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_get_logger_does_not_duplicate_handlers():
    first = get_logger("shortcut_crx.tests.repeat")
    second = get_logger("shortcut_crx.tests.repeat")
    assert first is second
    assert len(second.handlers) == 1


def test_debug_level_from_environment(monkeypatch):
    monkeypatch.setenv("DEBUG_LOGS_ENABLED", "true")
    assert get_logger("shortcut_crx.tests.debug").level == logging.DEBUG


def test_set_package_level_only_touches_package_loggers():
    inside = get_logger("shortcut_crx.tests.level")
    outside = get_logger("other_package.level")

    set_package_level(logging.WARNING)

    assert inside.level == logging.WARNING
    assert outside.level == logging.INFO
    set_package_level(logging.INFO)
