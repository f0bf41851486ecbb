# SPDX-License-Identifier: GPL-2.0-or-later
import logging
import os
import pathlib
from logging.handlers import RotatingFileHandler

from qtpy.QtCore import QCoreApplication, QStandardPaths

tr = QCoreApplication.translate

LOG_FILENAME = "viable.log"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"


def init_logger(directory=None):
    """Set up logging for the application embedding these keycodes.

    Nothing here calls it; the host application calls it once at startup, after
    its QApplication exists so the data location carries the application name.
    Logs go to viable.log in directory, or in Qt's AppLocalDataLocation when not
    given. Returns the file handler that was added to the root logger.
    """
    logging.basicConfig(level=logging.INFO)
    if directory is None:
        directory = QStandardPaths.writableLocation(QStandardPaths.AppLocalDataLocation)
    pathlib.Path(directory).mkdir(parents=True, exist_ok=True)
    path = os.path.join(directory, LOG_FILENAME)
    handler = RotatingFileHandler(path, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(handler)
    return handler
