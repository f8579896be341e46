import logging

import pytest

from asset_server.core.logging import configure_logging, get_level, set_level

pytestmark = pytest.mark.usefixtures("restore_root_level")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", logging.DEBUG),
        ("info", logging.INFO),
        ("warn", logging.WARNING),
        ("error", logging.ERROR),
        ("WARN", logging.WARNING),
        ("verbose", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_set_level(name, expected):
    set_level(name)
    assert logging.getLogger().level == expected


@pytest.mark.parametrize("name", ["debug", "info", "warn", "error"])
def test_get_level_round_trips_names(name):
    set_level(name)
    assert get_level() == name


def test_get_level_defaults_to_info_for_foreign_levels():
    logging.getLogger().setLevel(logging.CRITICAL)
    assert get_level() == "info"


def test_configure_logging_applies_level():
    configure_logging("error")
    assert get_level() == "error"


def test_level_gates_messages(caplog):
    log = logging.getLogger("asset_server.tests.gate")
    set_level("warn")
    log.info("hidden info")
    log.warning("visible warning")
    set_level("debug")
    log.debug("visible debug")

    messages = [r.getMessage() for r in caplog.records if r.name == log.name]
    assert messages == ["visible warning", "visible debug"]
