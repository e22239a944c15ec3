"""Miscellaneous tools for internal use."""

import logging
import numbers
from collections.abc import Sized
from logging import NullHandler

from .errors import InvalidArgumentError


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def clip(x, a, b):
    """Clip value within specified range."""
    return max(a, min(x, b))


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def known_size(iterable):
    """Return the length of `iterable` if it is readily available.

    Iterators and other unsized iterables return None, they are never
    consumed here.
    """
    if isinstance(iterable, Sized):
        try:
            return len(iterable)
        except (TypeError, ValueError, OverflowError):  # object has not len
            pass

    return None


# Argument validation ---------------------------------------------------------

def require_not_none(value, name):
    """Raise :class:`InvalidArgumentError` if `value` is None."""
    if value is None:
        raise InvalidArgumentError(name, "must not be None")

    return value


def require_non_negative(value, name):
    """Raise :class:`InvalidArgumentError` if `value` is negative.

    Non integral values raise a :class:`TypeError` instead.
    """
    if not isint(value):
        raise TypeError(
            "{} must be an integer, not {}".format(
                name, value.__class__.__name__))

    if value < 0:
        raise InvalidArgumentError(
            name, "must be non-negative, got {}".format(value))

    return value
