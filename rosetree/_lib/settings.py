"""
Environment Variables:

  ROSETREE_DEEP_CHECKS : When set to 1, true, yes or on, shape validation
    at public entry points walks every subtree instead of only checking
    the direct elements of a value.
"""
import logging
import os
from collections import namedtuple

logger = logging.getLogger(__name__)

DEEP_CHECKS_VAR = 'ROSETREE_DEEP_CHECKS'

_TRUTHY = ('1', 'true', 'yes', 'on')

Settings = namedtuple('Settings', ['deep_checks'])


def _flag(value):
    return (value or '').strip().lower() in _TRUTHY


def load(environ=None):
    """
    Build Settings from an environment mapping (defaults to os.environ).

    >>> load({'ROSETREE_DEEP_CHECKS': 'yes'})
    Settings(deep_checks=True)

    >>> load({})
    Settings(deep_checks=False)
    """
    if environ is None:
        environ = os.environ

    settings = Settings(deep_checks=_flag(environ.get(DEEP_CHECKS_VAR)))
    logger.debug('loaded %r', settings)
    return settings


_current = load()


def current():
    return _current


def configure(**overrides):
    """
    Replace the active settings, returning the ones that were replaced so
    callers can restore them.
    """
    global _current
    previous = _current
    _current = previous._replace(**overrides)
    logger.debug('configured %r', _current)
    return previous
