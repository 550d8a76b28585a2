"""
ioshim - typed stream providers over native I/O with pluggable error strategies
"""

import pkgutil

# Declare top-level shortcuts
from ioshim.api import open_append, open_input, open_output
from ioshim.resources import FileUrl, HttpUrl, stderr, stdin, stdout
from ioshim.strategy import (
    Failure,
    Success,
    return_result,
    throw_exceptions,
    using_strategy,
)
from ioshim.streams import BYTES, LINE, STR, DevNull

__all__ = [
    "BYTES",
    "LINE",
    "STR",
    "DevNull",
    "Failure",
    "FileUrl",
    "HttpUrl",
    "Success",
    "__version__",
    "open_append",
    "open_input",
    "open_output",
    "return_result",
    "stderr",
    "stdin",
    "stdout",
    "throw_exceptions",
    "using_strategy",
    "version_info",
]


__version__ = (pkgutil.get_data(__package__, "VERSION") or b"").decode("ascii").strip()
version_info = tuple(int(v) if v.isdigit() else v for v in __version__.split("."))


del pkgutil
