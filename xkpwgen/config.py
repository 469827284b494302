"""Reads default option values from an INI configuration file.

The file has a single section:

    [xkpwgen]
    length = 6
    number = 3
    separator = -
    colour = no

All keys are optional. A missing file leaves the builtin defaults in place.
Since values are stripped, a separator containing whitespace can only be given on the command line."""

from configparser import ConfigParser, Error as ConfigParserError
from dataclasses import dataclass, replace
import logging
import os
from pathlib import Path
from typing import Optional, Union

from .errors import ConfigError
from .style import ColourMode


LOGGER = logging.getLogger(__name__)

SECTION = 'xkpwgen'
CONFIG_ENV_VAR = 'XKPWGEN_CONFIG'


@dataclass(frozen = True)
class Defaults:
    length: int = 4
    number: int = 5
    separator: str = ' '
    colour: ColourMode = ColourMode.AUTO

def default_config_path() -> Path:
    if (path := os.environ.get(CONFIG_ENV_VAR)):
        return Path(path)
    return Path.home() / '.config' / 'xkpwgen' / 'config.ini'

def _parse_count(path: Path, key: str, val: str) -> int:
    try:
        count = int(val)
    except ValueError:
        raise ConfigError(f'{path}: {key} must be an integer, got {val!r}') from None
    if (count < 0):
        raise ConfigError(f'{path}: {key} must be non-negative, got {count}')
    return count

def load_defaults(path: Optional[Union[str, Path]] = None) -> Defaults:
    """Loads option defaults from the config file at path (or the default location)."""
    path = default_config_path() if (path is None) else Path(path)
    defaults = Defaults()
    if not path.is_file():
        LOGGER.debug(f'No config file at {path}')
        return defaults
    # no interpolation, so a separator may contain %
    cfg = ConfigParser(interpolation = None)
    try:
        with open(path, encoding = 'utf-8') as f:
            cfg.read_file(f)
    except (ConfigParserError, UnicodeDecodeError, OSError) as e:
        raise ConfigError(f'{path}: {e}') from e
    if not cfg.has_section(SECTION):
        LOGGER.warning(f'Config file {path} has no [{SECTION}] section')
        return defaults
    params = cfg[SECTION]
    overrides = {}
    for key in ['length', 'number']:
        if (key in params):
            overrides[key] = _parse_count(path, key, params[key])
    if ('separator' in params):
        # values are stripped, so an empty value joins the words directly
        overrides['separator'] = params['separator']
    if ('colour' in params):
        try:
            overrides['colour'] = ColourMode(params['colour'].lower())
        except ValueError:
            choices = ', '.join(mode.value for mode in ColourMode)
            raise ConfigError(f"{path}: colour must be one of {choices}, got {params['colour']!r}") from None
    LOGGER.info(f'Loaded defaults from {path}')
    return replace(defaults, **overrides)
