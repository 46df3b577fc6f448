"""Configuration and formatting helpers."""
import os
import logging
from typing import Iterable
import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'linearna.yml'
DEFAULT_PRECISION = 3

_cached = [None]


def load_config() -> dict:
    for path in os.curdir, os.path.expanduser('~'):
        try:
            with open(os.path.join(path, CONFIG_FILENAME), 'rt') as file:
                config = yaml.load(file, Loader=yaml.FullLoader)
        except FileNotFoundError:
            continue
        logger.debug('Loaded configuration from %s.', os.path.abspath(os.path.join(path, CONFIG_FILENAME)))
        # An empty file parses to None.
        return config or {}
    return {}


def get_config() -> dict:
    """Return the configuration, loading it on first use.

    An unreadable file is logged and treated as empty, so formatting a vector never fails because of it.
    """
    if _cached[0] is None:
        try:
            config = load_config()
        except yaml.YAMLError as e:
            logger.warning('Ignoring malformed %s: %s', CONFIG_FILENAME, e)
            config = {}
        if not isinstance(config, dict):
            logger.warning('Ignoring %s: expected a mapping, got %s.', CONFIG_FILENAME, type(config).__name__)
            config = {}
        _cached[0] = config
    return _cached[0]


def reset_config():
    _cached[0] = None


def get_precision() -> int:
    precision = get_config().get('precision', DEFAULT_PRECISION)
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
        logger.warning('Configured precision must be a non-negative integer, got %r. Using %d.', precision,
            DEFAULT_PRECISION)
        return DEFAULT_PRECISION
    return precision


def format_elements(elements: Iterable[float], precision: int) -> str:
    return '[' + ', '.join('%.*f' % (precision, element) for element in elements) + ']'
