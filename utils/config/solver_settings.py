# File: utils/config/solver_settings.py

"""
Loads solver settings from solver_settings.json, with environment overrides.

    KEYPAD_CHAIN_DEPTHS  comma-separated depths to report, e.g. "2" or "0,1,2"
    KEYPAD_LOG_LEVEL     root log level name, e.g. "DEBUG"
    KEYPAD_LOG_FILE      path of a log file; empty string disables file logging

Per-logger levels ("logger_levels") are read from the file only.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, List, Optional

_settings_logger = logging.getLogger(__name__)

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_SETTINGS_PATH = os.path.join(_CONFIG_DIR, 'solver_settings.json')

DEFAULT_SETTINGS: Dict[str, Any] = {
    'chain_depths': [2],
    'log_level': 'INFO',
    'log_file_path': None,
    'logger_levels': {},
}


class SettingsError(ValueError):
    """Raised when the settings file or an environment override holds an invalid value."""
    pass


def _parse_depths(value: Any, source: str) -> List[int]:
    if isinstance(value, str):
        try:
            value = [int(part) for part in value.split(',') if part.strip()]
        except ValueError:
            raise SettingsError(f"{source}: chain depths must be comma-separated integers, got {value!r}.") from None
    if not isinstance(value, list) or not value:
        raise SettingsError(f"{source}: chain depths must be a non-empty list, got {value!r}.")
    for depth in value:
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
            raise SettingsError(f"{source}: chain depth {depth!r} is not a non-negative integer.")
    return value


def _parse_log_level(value: Any, source: str) -> str:
    if not isinstance(value, str) or not isinstance(getattr(logging, value.upper(), None), int):
        raise SettingsError(f"{source}: invalid log level {value!r}.")
    return value.upper()


def _parse_logger_levels(value: Any, source: str) -> Dict[str, str]:
    if not isinstance(value, dict):
        raise SettingsError(f"{source}: must map logger names to levels, got {value!r}.")
    return {name: _parse_log_level(level, f"{source}.{name}") for name, level in value.items()}


def load_solver_settings(path: Optional[str] = None, environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Returns the effective settings: defaults, then the JSON file, then environment overrides.
    """
    settings_path = path if path else DEFAULT_SETTINGS_PATH
    env = environ if environ is not None else os.environ
    settings = copy.deepcopy(DEFAULT_SETTINGS)

    try:
        _settings_logger.debug(f"Attempting to load solver settings from: {settings_path}")
        with open(settings_path, 'r') as f:
            file_settings = json.load(f)
    except FileNotFoundError:
        if path:
            _settings_logger.error(f"Settings file not found at '{settings_path}'.")
            raise
        _settings_logger.warning(f"Default settings file '{settings_path}' is missing. Using built-in defaults.")
        file_settings = {}
    except json.JSONDecodeError as e:
        raise SettingsError(f"Could not parse '{settings_path}': {e}") from e

    if not isinstance(file_settings, dict):
        raise SettingsError(f"'{settings_path}' must hold a JSON object.")

    unknown = set(file_settings) - set(DEFAULT_SETTINGS)
    if unknown:
        _settings_logger.warning(f"Ignoring unknown settings in '{settings_path}': {sorted(unknown)}")
    settings.update({key: value for key, value in file_settings.items() if key in DEFAULT_SETTINGS})

    if 'KEYPAD_CHAIN_DEPTHS' in env:
        settings['chain_depths'] = env['KEYPAD_CHAIN_DEPTHS']
    if 'KEYPAD_LOG_LEVEL' in env:
        settings['log_level'] = env['KEYPAD_LOG_LEVEL']
    if 'KEYPAD_LOG_FILE' in env:
        settings['log_file_path'] = env['KEYPAD_LOG_FILE'] or None

    settings['chain_depths'] = _parse_depths(settings['chain_depths'], 'chain_depths')
    settings['log_level'] = _parse_log_level(settings['log_level'], 'log_level')
    settings['logger_levels'] = _parse_logger_levels(settings['logger_levels'], 'logger_levels')
    if settings['log_file_path'] is not None and not isinstance(settings['log_file_path'], str):
        raise SettingsError(f"log_file_path must be a string or null, got {settings['log_file_path']!r}.")

    _settings_logger.debug(f"Effective solver settings: {settings}")
    return settings
