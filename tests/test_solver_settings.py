# Directory: tests/
# Filename: test_solver_settings.py

import json
import logging

import pytest

from utils.config.solver_settings import DEFAULT_SETTINGS, SettingsError, load_solver_settings


@pytest.fixture
def settings_file(tmp_path):
    def _write(content):
        path = tmp_path / "solver_settings.json"
        path.write_text(content if isinstance(content, str) else json.dumps(content))
        return str(path)
    return _write


def test_shipped_defaults():
    assert load_solver_settings(environ={}) == {
        'chain_depths': [2],
        'log_level': 'INFO',
        'log_file_path': None,
        'logger_levels': {'transitions': 'WARNING'},
    }


def test_file_values(settings_file):
    path = settings_file({'chain_depths': [0, 1, 2], 'log_level': 'debug', 'log_file_path': 'logs/run.log'})
    settings = load_solver_settings(path, environ={})
    assert settings == {
        'chain_depths': [0, 1, 2],
        'log_level': 'DEBUG',
        'log_file_path': 'logs/run.log',
        'logger_levels': {},
    }


def test_environment_overrides_file(settings_file):
    path = settings_file({'chain_depths': [2], 'log_file_path': 'logs/run.log'})
    env = {'KEYPAD_CHAIN_DEPTHS': '0, 1,2', 'KEYPAD_LOG_LEVEL': 'warning', 'KEYPAD_LOG_FILE': ''}
    settings = load_solver_settings(path, environ=env)
    assert settings['chain_depths'] == [0, 1, 2]
    assert settings['log_level'] == 'WARNING'
    assert settings['log_file_path'] is None


def test_defaults_are_not_shared(settings_file):
    settings = load_solver_settings(settings_file({}), environ={})
    settings['chain_depths'].append(7)
    assert DEFAULT_SETTINGS['chain_depths'] == [2]


def test_unknown_keys_are_ignored(settings_file, caplog):
    path = settings_file({'chain_depth': 3})
    with caplog.at_level(logging.WARNING, logger="utils.config.solver_settings"):
        settings = load_solver_settings(path, environ={})
    assert settings['chain_depths'] == [2]
    assert "chain_depth" in caplog.text


@pytest.mark.parametrize("env_depths", ['-1', 'two', '', '1.5'])
def test_invalid_env_depths(settings_file, env_depths):
    with pytest.raises(SettingsError):
        load_solver_settings(settings_file({}), environ={'KEYPAD_CHAIN_DEPTHS': env_depths})


@pytest.mark.parametrize("content", [
    {'chain_depths': 2},
    {'chain_depths': []},
    {'chain_depths': [True]},
    {'log_level': 'verbose'},
    {'log_level': 'BASIC_FORMAT'},
    {'log_file_path': 5},
    {'logger_levels': ['DEBUG']},
    {'logger_levels': {'controllers.robot_chain': 'loud'}},
    [1, 2],
])
def test_invalid_file_values(settings_file, content):
    with pytest.raises(SettingsError):
        load_solver_settings(settings_file(content), environ={})


def test_malformed_json(settings_file):
    with pytest.raises(SettingsError, match="Could not parse"):
        load_solver_settings(settings_file("{not json"), environ={})


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_solver_settings(str(tmp_path / "missing.json"), environ={})


def test_missing_default_file_falls_back(monkeypatch, tmp_path):
    monkeypatch.setattr('utils.config.solver_settings.DEFAULT_SETTINGS_PATH', str(tmp_path / "gone.json"))
    assert load_solver_settings(environ={}) == DEFAULT_SETTINGS


def test_logger_levels_are_normalized(settings_file):
    path = settings_file({'logger_levels': {'controllers.robot_chain': 'debug'}})
    settings = load_solver_settings(path, environ={'KEYPAD_LOG_LEVEL': 'warning'})
    assert settings['logger_levels'] == {'controllers.robot_chain': 'DEBUG'}
    assert settings['log_level'] == 'WARNING'
