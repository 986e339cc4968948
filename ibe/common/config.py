# -*- coding: utf-8 -*-

"""Manages settings and config file.

Manages the settings of the SDK: IBE server address, request timeout, log
levels and proxy settings.
Settings are loaded from a configuration file. If they don't exists, default
values are provided.
When an option is set, the config file is updated.

Before any use, the module should be initialized by calling ``load()``.
"""

import configparser
import logging
import os.path

from . import path as ibe_path

_logger = logging.getLogger(__name__)


# Default config dict. Values not present in this dict are not valid.
# Each entry contains the type expected, and the default value.
_default_config = {
    'api_url': {'type': str, 'default': 'http://localhost:80'},
    'timeout': {'type': float, 'default': 30.0},
    'debug_mode': {'type': bool, 'default': False},
    'log_levels': {'type': dict, 'default': {}},
    'proxy_mode': {'type': str, 'default': 'system_settings'},
    'proxy_type': {'type': str, 'default': 'HTTP'},
    'proxy_url': {'type': str, 'default': None},
    'proxy_port': {'type': int, 'default': None},
    'proxy_user': {'type': str, 'default': None},
    'proxy_password': {'type': str, 'default': None}
}

# Actual config parser
_config_parser = configparser.ConfigParser(interpolation=None)
_config_parser.add_section('config')

# Set by load() when an explicit path is given.
_config_file_path = None


def _get_config_file_path():
    if _config_file_path:
        return _config_file_path
    return os.path.join(ibe_path.get_config_dir(), 'ibe.ini')


def load(config_file_path=None):
    """Find and load the config file.

    Args:
        config_file_path (str, optional): path of the config file. By
            default, 'ibe.ini' in the user config directory is used.
    """
    global _config_file_path

    _config_file_path = config_file_path
    config_file_path = _get_config_file_path()

    # Entries of a previously loaded file are dropped.
    _config_parser.remove_section('config')
    _config_parser.add_section('config')

    if not _config_parser.read(config_file_path):
        _logger.warning('Unable to load config file: %s', config_file_path)


def get(key):
    """Find and return a configuration entry

    If the entry is not specified in the config file, a default value is
    returned.

    Args:
        key (string): the entry key.
    Returns:
        The corresponding value found.
    Raises:
        KeyError: if the config entry doesn't exists.
    """
    if key not in _default_config:
        raise KeyError(key)
    try:
        if _default_config[key]['type'] is bool:
            return _config_parser.getboolean('config', key)
        elif _default_config[key]['type'] is int:
            return _config_parser.getint('config', key)
        elif _default_config[key]['type'] is float:
            return _config_parser.getfloat('config', key)
        elif _default_config[key]['type'] is dict:
            # Dict entries are in the form 'key=value;key2=value2'
            dict_str = _config_parser.get('config', key)
            result = {}
            for pair in filter(None, dict_str.split(';')):
                try:
                    (k, v) = pair.split('=')
                    result[k] = v
                except ValueError:
                    _logger.warning('Unable to parse pair key=value: "%s"',
                                    pair)
            return result
        else:
            return _config_parser.get('config', key)
    except configparser.NoOptionError:
        return _default_config[key]['default']
    except ValueError:
        _logger.warning('Invalid value for config entry "%s". The default '
                        'value will be used.', key)
        return _default_config[key]['default']


def set(key, value):
    """Set a configuration entry.

    Args:
        key (string): the entry key.
        value: the new value to set. It will be converted to string. Dict
            values are stored in the form 'key=value;key2=value2'. None
            removes the entry: the default value will be used.
    Raises:
        KeyError: if the config entry is not valid.
    """
    if key not in _default_config:
        raise KeyError(key)
    if value is None:
        _config_parser.remove_option('config', key)
    else:
        if isinstance(value, dict):
            value = ';'.join('%s=%s' % item for item in value.items())
        _config_parser.set('config', key, str(value))
    config_file_path = _get_config_file_path()
    try:
        with open(config_file_path, 'w') as config_file:
            _config_parser.write(config_file)
        _logger.debug('Config file modified.')
    except IOError:
        _logger.warning('Unable to write in the config file', exc_info=True)
