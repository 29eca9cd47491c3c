"""Utility functions for pyAWC package

This module contains utility functions used by various parts of the codebase.
"""

import logging
import os
import sys
import time

# Setup a default logging instance for this module
LOG = logging.getLogger("pyawc")
LOG.addHandler(logging.NullHandler())


class CustomFormatter(logging.Formatter):
    """A custom log formatter class."""

    def format(self, record):
        """Return a string!"""
        return (
            f"[{time.strftime('%H:%M:%S', time.localtime(record.created))} "
            f"{(record.relativeCreated / 1000.0):6.3f} "
            f"{record.filename}:{record.lineno} {record.funcName}] "
            f"{record.getMessage()}"
        )


def get_test_filepath(name: str) -> str:
    """Helper to get a testing filename, full path."""
    return f"{os.getcwd()}/data/product_examples/{name}"


def get_test_file(name):
    """Helper to get data for test usage."""
    with open(get_test_filepath(name), "rb") as fp:
        return fp.read().decode("utf-8")


def logger(name="pyawc", level=None):
    """Get pyawc's logger with a stream handler attached.

    Args:
      name (str): The name of the logger to get, default pyawc
      level (logging.LEVEL): The log level for this pyawc logger, default is
        WARNING for non interactive sessions, INFO otherwise

    Returns:
      logger instance
    """
    ch = logging.StreamHandler()
    ch.setFormatter(CustomFormatter())
    log = logging.getLogger(name)
    log.addHandler(ch)
    if level is None and sys.stdout.isatty():
        level = logging.INFO
    log.setLevel(level if level is not None else logging.WARNING)
    return log


def keep_in_range(value: float, minval: float, maxval: float) -> float:
    """Pin a value to the closed interval [minval, maxval].

    Args:
      value (float): the value to check.
      minval (float): the lower bound, returned for anything at or below it.
      maxval (float): the upper bound, returned for anything at or above it.

    Returns:
      float
    """
    if value <= minval:
        return minval
    if value >= maxval:
        return maxval
    return value

