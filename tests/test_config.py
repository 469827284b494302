"""Tests for loading option defaults from a config file."""

import pytest

from xkpwgen import config
from xkpwgen.config import CONFIG_ENV_VAR, Defaults, default_config_path, load_defaults
from xkpwgen.errors import ConfigError
from xkpwgen.style import ColourMode


def write_config(tmp_path, text):
    path = tmp_path / 'config.ini'
    path.write_text(text)
    return path

def test_missing_file_gives_builtin_defaults(tmp_path):
    defaults = load_defaults(tmp_path / 'missing.ini')
    assert defaults == Defaults()
    assert (defaults.length, defaults.number, defaults.separator, defaults.colour) == (4, 5, ' ', ColourMode.AUTO)

def test_overrides(tmp_path):
    path = write_config(tmp_path, '[xkpwgen]\nlength = 6\nnumber = 2\nseparator = -\ncolour = NO\n')
    assert load_defaults(path) == Defaults(length = 6, number = 2, separator = '-', colour = ColourMode.NO)

def test_partial_overrides(tmp_path):
    path = write_config(tmp_path, '[xkpwgen]\nnumber = 1\n')
    assert load_defaults(path) == Defaults(number = 1)

def test_empty_separator(tmp_path):
    path = write_config(tmp_path, '[xkpwgen]\nseparator =\n')
    assert load_defaults(path).separator == ''

def test_other_sections_are_ignored(tmp_path):
    path = write_config(tmp_path, '[other]\nlength = 10\n')
    assert load_defaults(path) == Defaults()

@pytest.mark.parametrize('text', [
    '[xkpwgen]\nlength = four\n',
    '[xkpwgen]\nnumber = -1\n',
    '[xkpwgen]\ncolour = sometimes\n',
    'length = 4\n',
])
def test_invalid_config(tmp_path, text):
    path = write_config(tmp_path, text)
    with pytest.raises(ConfigError, match = 'config.ini'):
        load_defaults(path)

def test_default_path_from_environment(monkeypatch, tmp_path):
    path = write_config(tmp_path, '[xkpwgen]\nlength = 7\n')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert default_config_path() == path
    assert load_defaults().length == 7

def test_default_path_in_home(monkeypatch, tmp_path):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising = False)
    monkeypatch.setenv('HOME', str(tmp_path))
    assert default_config_path() == tmp_path / '.config' / 'xkpwgen' / 'config.ini'

@pytest.mark.parametrize('separator', ['%', '%%', '%(length)s'])
def test_separator_is_not_interpolated(tmp_path, separator):
    path = write_config(tmp_path, f'[xkpwgen]\nseparator = {separator}\n')
    assert load_defaults(path).separator == separator

@pytest.mark.parametrize('data', [
    b'[xkpwgen]\nseparator = \xff\n',
    b'\xfe\xff[xkpwgen]\n',
])
def test_undecodable_config(tmp_path, data):
    path = tmp_path / 'config.ini'
    path.write_bytes(data)
    with pytest.raises(ConfigError, match = 'config.ini'):
        load_defaults(path)

def test_unreadable_config(monkeypatch, tmp_path):
    path = write_config(tmp_path, '[xkpwgen]\nlength = 6\n')
    def fail(*args, **kwargs):
        raise PermissionError(13, 'Permission denied')
    monkeypatch.setattr(config, 'open', fail, raising = False)
    with pytest.raises(ConfigError, match = 'Permission denied'):
        load_defaults(path)
