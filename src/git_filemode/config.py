# use configparser to approximate gitconfig format

import os
import pathlib
from configparser import ConfigParser, Error as ConfigParserError

from . import paths
from .util import get_logger

logger = get_logger("config")

_true_values = ("true", "yes", "on", "1")
_false_values = ("false", "no", "off", "0", "")


def _config_files():
    files = []
    try:
        files.append(paths.find_config_file())
    except paths.NotGitRepositoryError:
        logger.debug("not inside a repository, skipping local config")
    home = os.environ.get("HOME")
    if home:
        files.append(pathlib.Path(home) / ".gitconfig")
    return files


def _read_config(config_file):
    config = ConfigParser(strict=False, interpolation=None, allow_no_value=True)
    try:
        with open(config_file) as f:
            # git indents keys with tabs, which configparser reads as continuations
            lines = [line.strip() for line in f]
    except FileNotFoundError:
        return config
    try:
        config.read_string("\n".join(lines), source=str(config_file))
    except ConfigParserError as e:
        logger.debug(f"ignoring unreadable config {config_file}: {e}")
    return config


def _find_section(config, section):
    # section names are case-insensitive in git
    for name in config.sections():
        if name.lower() == section.lower():
            return config[name]
    raise KeyError(section)


def get_config(section, key):
    # local config takes precedence over global config
    for config_file in _config_files():
        config = _read_config(config_file)
        try:
            val = _find_section(config, section)[key]
        except KeyError:
            continue
        # a key without a value means true
        return "true" if val is None else val
    return None


def get_bool_config(section, key, default=False):
    val = get_config(section, key)
    if val is None:
        return default
    val = val.strip().lower()
    if val in _true_values:
        return True
    if val in _false_values:
        return False
    logger.debug(f"{section}.{key}: unrecognized boolean {val!r}")
    return default


def filemode_enabled():
    return get_bool_config("core", "filemode", default=True)
