"""Logging utilities."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import logging
import os
import sys
import tempfile
from logging.handlers import RotatingFileHandler
from typing import Optional

from swisspairing.constants import LOG_DIR_ENV_VAR, LOG_FILE_NAME, LOG_LEVEL_ENV_VAR

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"

# one file handler shared by every module logger
_file_handler: Optional[RotatingFileHandler] = None
_file_handler_attempted = False


def _log_level() -> int:
    """Resolve the log level from the environment, INFO by default."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _log_folder() -> Optional[str]:
    """Pick a writable folder for the log file.

    An explicit ``SWISSPAIRING_LOG_DIR`` wins. Otherwise use a dedicated
    "Swiss Pairing" folder in roaming AppData on Windows, the XDG state
    directory elsewhere, and the temp directory as a last resort.
    """
    explicit = os.environ.get(LOG_DIR_ENV_VAR)
    if explicit:
        return explicit

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return os.path.join(appdata, "Swiss Pairing", "logs")
    else:
        state_home = os.environ.get("XDG_STATE_HOME") or os.path.join(
            os.path.expanduser("~"), ".local", "state"
        )
        return os.path.join(state_home, "swiss-pairing", "logs")

    return os.path.join(tempfile.gettempdir(), "swiss-pairing", "logs")


def _shared_file_handler(log_formatter: logging.Formatter) -> Optional[RotatingFileHandler]:
    global _file_handler, _file_handler_attempted
    if _file_handler_attempted:
        return _file_handler
    _file_handler_attempted = True

    for folder in (_log_folder(), os.path.join(tempfile.gettempdir(), "swiss-pairing", "logs")):
        try:
            os.makedirs(folder, exist_ok=True)
            # Use RotatingFileHandler to prevent unbounded log growth
            handler = RotatingFileHandler(
                os.path.join(folder, LOG_FILE_NAME),
                maxBytes=5 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
        except OSError:
            continue
        handler.setFormatter(log_formatter)
        _file_handler = handler
        break
    return _file_handler


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up file handler and console handler

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    level = _log_level()
    lgr.setLevel(level)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    # Console Handler (stderr keeps CLI output on stdout clean)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(max(level, logging.WARNING))
    lgr.addHandler(console_handler)

    file_handler = _shared_file_handler(log_formatter)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr
