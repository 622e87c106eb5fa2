# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for pyellipsoid

Library modules only create loggers with ``logging.getLogger(__name__)``;
nothing here runs on import except registering the TRACE level name.
Applications opt in with ``setup_logger`` or ``setup_logger_from_config``.
"""

import copy
import logging
import sys
from enum import Enum
from typing import Dict, Optional

ROOT_LOGGER_NAME = "pyellipsoid"

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_DATEFMT = '%H:%M:%S'
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
FILE_DATEFMT = '%Y-%m-%d %H:%M:%S'


class LogLevel(Enum):
    """Log levels understood by the configuration helpers

    TRACE sits below DEBUG and is meant for per-point diagnostics of the
    foot point computation.
    """
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def value_of(cls, level: str) -> int:
        """Numeric level for a level name such as 'debug' or 'TRACE'"""
        try:
            return cls[level.upper()].value
        except KeyError:
            raise ValueError(f"Unknown log level: {level}") from None


logging.addLevelName(LogLevel.TRACE.value, LogLevel.TRACE.name)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name by severity"""

    RESET = '\033[0m'
    LEVEL_COLORS = {
        LogLevel.TRACE.value: '\033[36m',
        LogLevel.DEBUG.value: '\033[34m',
        LogLevel.INFO.value: '\033[32m',
        LogLevel.WARNING.value: '\033[33m',
        LogLevel.ERROR.value: '\033[31m',
        LogLevel.CRITICAL.value: '\033[35m',
    }

    def format(self, record):
        # other handlers share the record, so only a copy is colored
        shown = copy.copy(record)
        color = self.LEVEL_COLORS.get(shown.levelno, self.RESET)
        shown.levelname = f"{color}{shown.levelname}{self.RESET}"
        return super().format(shown)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    return handler


def setup_logger(name: str = ROOT_LOGGER_NAME,
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Attach console and/or file handlers to a pyellipsoid logger

    Calling this again for the same name replaces the handlers of the
    earlier call.

    Parameters
    ----------
    name : str
        Logger name; the default covers every pyellipsoid module
    level : str
        One of TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file : str, optional
        Also write plain (uncolored) records to this file
    console : bool
        Write colored records to stdout

    Returns
    -------
    logging.Logger
        The configured logger
    """
    numeric_level = LogLevel.value_of(level)
    target = logging.getLogger(name)
    target.setLevel(numeric_level)

    for old in list(target.handlers):
        target.removeHandler(old)
        old.close()

    if console:
        target.addHandler(_console_handler(numeric_level))
    if log_file:
        target.addHandler(_file_handler(log_file, numeric_level))
    return target


def get_logger(name: str) -> logging.Logger:
    """Logger for a module name, e.g. ``get_logger(__name__)``"""
    return logging.getLogger(name)


class LogContext:
    """Temporarily change the level of a logger

    Examples
    --------
    >>> validation_logger = logging.getLogger("pyellipsoid.validation")
    >>> with LogContext(validation_logger, "DEBUG"):
    ...     validation_logger.debug("visible")
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = LogLevel.value_of(level)
        self.old_level = None

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)


class LoggerConfig:
    """Package level plus per-module overrides, applied in one call

    Attributes
    ----------
    default_level : str
        Level of the ``pyellipsoid`` logger
    module_levels : dict
        Level overrides keyed by module name, e.g. ``pyellipsoid.validation``
    log_file : str or None
        Optional file shared by every configured logger
    console : bool
        Whether configured loggers also write to stdout
    """

    def __init__(self):
        self.default_level = "WARNING"
        self.module_levels: Dict[str, str] = {}
        self.log_file: Optional[str] = None
        self.console = True

    def set_module_level(self, module_name: str, level: str):
        """Override the level of one module

        A module logger that already has handlers is updated immediately.
        """
        numeric_level = LogLevel.value_of(level)
        self.module_levels[module_name] = level

        module_logger = logging.getLogger(module_name)
        if module_logger.handlers:
            module_logger.setLevel(numeric_level)
            for handler in module_logger.handlers:
                handler.setLevel(numeric_level)

    def set_default_level(self, level: str):
        LogLevel.value_of(level)
        self.default_level = level

    def get_level_for_module(self, module_name: str) -> str:
        return self.module_levels.get(module_name, self.default_level)

    def configure_from_dict(self, config: dict):
        """Read ``default_level``, ``log_file``, ``console`` and ``module_levels``"""
        if 'default_level' in config:
            self.set_default_level(config['default_level'])
        self.log_file = config.get('log_file', self.log_file)
        self.console = bool(config.get('console', self.console))
        for module_name, level in config.get('module_levels', {}).items():
            self.set_module_level(module_name, level)

    def setup_all_loggers(self):
        """Install handlers on the package logger and every overridden module"""
        setup_logger(ROOT_LOGGER_NAME, self.default_level, self.log_file, self.console)
        for module_name, level in self.module_levels.items():
            module_logger = setup_logger(module_name, level, self.log_file, self.console)
            # module handlers already emit; no second copy from the package logger
            module_logger.propagate = False


logger_config = LoggerConfig()


def setup_logger_from_config(config: dict):
    """Configure pyellipsoid logging from a plain dictionary

    Example config::

        {
            'default_level': 'INFO',
            'log_file': 'conversions.log',
            'console': True,
            'module_levels': {
                'pyellipsoid.validation': 'DEBUG',
                'pyellipsoid.coordinate.excess': 'TRACE',
            },
        }
    """
    logger_config.configure_from_dict(config)
    logger_config.setup_all_loggers()
