"""Python client for the Aviation Weather Center Text Data Server

The AWC Text Data Server hands out METAR observations as XML.  This package
builds the query, fetches it and turns the response into pydantic models.
"""

import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyawc")
    pkgdir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
    if not pkgdir.endswith("site-packages"):
        __version__ += "-dev"
except PackageNotFoundError:
    # package is not installed
    __version__ = "dev"
