"""Unit tests for configuration management."""

import pytest
from objdumper.core.config import Config, get_config, split_key
from objdumper.core.errors import ConfigError


def test_get_fallback():
    """Test fallback is returned for unknown keys."""
    config = Config()
    assert config.get('core', 'git') is None
    assert config.get('core', 'git', 'git') == 'git'


def test_set_and_get(isolated_config):
    """Test values are written to the config file."""
    config = Config()
    config.set('core', 'git', '/opt/git')
    assert isolated_config.exists()
    assert Config().get('core', 'git') == '/opt/git'


def test_env_overrides_file(monkeypatch):
    """Test environment variables take precedence."""
    Config().set('scan', 'root', '/from/file')
    monkeypatch.setenv('OBJDUMPER_SCAN_ROOT', '/from/env')
    assert Config().get('scan', 'root') == '/from/env'


def test_unset():
    """Test removing a value and its now empty section."""
    config = Config()
    config.set('core', 'repository', '/repo')
    assert config.unset('core', 'repository') is True
    assert config.unset('core', 'repository') is False
    assert Config().list_all() == {}


def test_list_all():
    """Test listing values by section."""
    config = Config()
    config.set('core', 'git', 'git2')
    config.set('scan', 'root', 'objs')
    assert Config().list_all() == {
        'core': {'git': 'git2'},
        'scan': {'root': 'objs'},
    }


def test_get_bool(monkeypatch):
    """Test boolean spellings."""
    config = Config()
    assert config.get_bool('color', 'ui', True) is True
    monkeypatch.setenv('OBJDUMPER_COLOR_UI', 'false')
    assert config.get_bool('color', 'ui', True) is False
    monkeypatch.setenv('OBJDUMPER_COLOR_UI', 'yes')
    assert config.get_bool('color', 'ui', False) is True


def test_explicit_path(temp_dir):
    """Test a config file at a custom location."""
    path = temp_dir / 'custom.ini'
    path.write_text("[core]\ngit = mygit\n")
    assert get_config(path).get('core', 'git') == 'mygit'


def test_split_key():
    """Test dotted keys and bare keys."""
    assert split_key('core.git') == ('core', 'git')
    assert split_key('git') == ('core', 'git')


def test_malformed_file_falls_back(isolated_config):
    """Test a file that does not parse reads as empty."""
    isolated_config.write_text("no section header\ngit = mygit\n")
    config = Config()
    assert config.get('core', 'git', 'git') == 'git'
    assert config.load_error is not None
    assert config.list_all() == {}


def test_malformed_file_not_overwritten(isolated_config):
    """Test writes are refused so the broken file is left for the user."""
    original = "[core]\ngit = a\n[core]\ngit = b\n"
    isolated_config.write_text(original)
    with pytest.raises(ConfigError):
        Config().set('scan', 'root', 'objs')
    assert isolated_config.read_text() == original


def test_percent_in_value():
    """Test values are returned without interpolation."""
    Config.CONFIG_PATH.write_text("[core]\nrepository = /srv/100%\n")
    assert Config().get('core', 'repository') == '/srv/100%'
