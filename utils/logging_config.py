# Directory: utils
# Filename: logging_config.py

"""
Logging for the solver, driven by the solver settings dict
(see utils/config/solver_settings.py):

    log_level      level of the root logger and of every solver logger
    logger_levels  per-logger overrides, e.g. {"controllers.robot_chain": "DEBUG"}
    log_file_path  optional log file, appended to
"""

import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional

LOG_FORMAT = '%(asctime)s.%(msecs)03d  %(levelname)-8s  %(name)s  %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers that follow the configured solver level.
SOLVER_LOGGERS = (
    "KeypadToolkit",
    "SolveCodesScript",
    "controllers.chain_composer",
    "controllers.path_enumerator", # DEBUG shows every path dropped at the gap
    "controllers.robot_chain", # DEBUG shows every relayed press
    "controllers.complexity", # Per-code results at INFO
    "utils.config.solver_settings",
)

# Library loggers stay at these levels whatever the solver level is.
LIBRARY_LOG_LEVELS = {
    "transitions": logging.WARNING,
}


def _to_level(level: Any) -> int:
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")
    return numeric_level


def resolve_log_levels(settings: Optional[Mapping[str, Any]] = None) -> Dict[str, int]:
    """
    Maps logger name -> numeric level for the given settings.
    'root' and the solver loggers take `log_level`; `logger_levels` entries win over both.
    """
    settings = settings or {}
    solver_level = _to_level(settings.get('log_level') or logging.INFO)

    levels = {"root": solver_level}
    levels.update({name: solver_level for name in SOLVER_LOGGERS})
    levels.update(LIBRARY_LOG_LEVELS)
    for name, level in (settings.get('logger_levels') or {}).items():
        levels[name] = _to_level(level)
    return levels


def setup_logging(
    settings: Optional[Mapping[str, Any]] = None,
    log_to_console: bool = True,
    log_format: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> Dict[str, int]:
    """
    Configures the logging system from solver settings. Call once at application start.
    Returns the levels that were applied.
    """
    levels = resolve_log_levels(settings)
    log_file_path = (settings or {}).get('log_file_path')

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(levels["root"])

    formatter = logging.Formatter(log_format, datefmt=date_format)
    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file_path:
        try:
            log_dir = os.path.dirname(log_file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file_path, mode='a', encoding='utf-8')
        except OSError as e:
            # Without a console handler this reaches stderr through logging.lastResort.
            root_logger.error(f"Could not open log file '{log_file_path}': {e}. Continuing without it.")
            log_file_path = None
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    for logger_name, level in levels.items():
        if logger_name != "root":
            logging.getLogger(logger_name).setLevel(level)

    file_logging_status = f"'{log_file_path}'" if log_file_path else "Disabled"
    logging.getLogger("LoggingConfig").info(
        f"Logging configured. Level: {logging.getLevelName(levels['root'])}. "
        f"Console: {log_to_console}, File: {file_logging_status}."
    )
    return levels
