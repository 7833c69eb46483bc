import json
import logging

import pytest

from menuadmin.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_logging_includes_extra_fields(capsys):
    setup_logging("INFO", json_logs=True)

    logging.getLogger("menuadmin.test").info("Menu created", extra={"menu_id": 7})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "Menu created"
    assert record["menu_id"] == 7
    assert record["levelname"] == "INFO"
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_console_logging_and_debug_level(capsys):
    setup_logging("debug", json_logs=False)

    logging.getLogger("menuadmin.test").debug("tree assembled")

    assert "| DEBUG    | menuadmin.test | tree assembled" in capsys.readouterr().out
