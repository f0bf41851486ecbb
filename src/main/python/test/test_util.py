import logging
import os

from logging.handlers import RotatingFileHandler

from util import init_logger, tr, LOG_FILENAME


def test_init_logger(tmp_path, root_logger):
    directory = tmp_path / "logs"
    handler = init_logger(str(directory))

    assert isinstance(handler, RotatingFileHandler)
    assert handler in root_logger.handlers
    assert handler.maxBytes == 5 * 1024 * 1024
    assert handler.backupCount == 5

    logging.warning("custom keycodes ready")
    handler.flush()
    with open(os.path.join(str(directory), LOG_FILENAME), encoding="utf-8") as f:
        line = f.read()
    assert "WARNING - test_util:" in line
    assert line.rstrip().endswith("custom keycodes ready")


def test_tr_without_translator():
    assert tr("Keycode", "User keycode {}").format(3) == "User keycode 3"
