# SPDX-License-Identifier: GPL-2.0-or-later
"""Pytest configuration - runs before any tests."""
import logging

import pytest

from keycodes.keycodes import Keycode, create_user_keycodes, recreate_keycodes


@pytest.fixture(autouse=True)
def reset_user_keycodes():
    """Every test starts from the placeholder USER slots with v6 keycodes.

    The keycode tables are module globals, so a test that registers a keyboard's
    custom keycodes would otherwise leak them into the next one.
    """
    Keycode.protocol = 6
    create_user_keycodes()
    recreate_keycodes()
    yield
    Keycode.protocol = 6
    create_user_keycodes()
    recreate_keycodes()


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
