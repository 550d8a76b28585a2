"""This module contains the default values for all settings used by ioshim.

If you add a setting here remember to:

* add it in alphabetical order, with the exception that enabling flags and
  other high-level settings for a group should come first in their group
* group similar settings without leaving blank lines
"""

import io

__all__ = [
    "BUFFER_SIZE",
    "ENCODING",
    "ENCODING_ERRORS",
    "HTTP_TIMEOUT",
    "HTTP_USER_AGENT",
    "LOG_DATEFORMAT",
    "LOG_ENABLED",
    "LOG_ENCODING",
    "LOG_FILE",
    "LOG_FILE_APPEND",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "LOG_SHORT_NAMES",
    "NEWLINE",
    "STREAM_PROVIDERS",
    "STREAM_PROVIDERS_BASE",
]

BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE

ENCODING = "utf-8"
ENCODING_ERRORS = "strict"

HTTP_TIMEOUT = 180.0
HTTP_USER_AGENT = "ioshim"

LOG_ENABLED = True
LOG_DATEFORMAT = "%Y-%m-%d %H:%M:%S"
LOG_ENCODING = "utf-8"
LOG_FILE = None
LOG_FILE_APPEND = True
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
LOG_LEVEL = "DEBUG"
LOG_SHORT_NAMES = False

# None keeps universal newlines on read and the platform default on write
NEWLINE = None

STREAM_PROVIDERS = {}
STREAM_PROVIDERS_BASE = {
    "ioshim.providers.file.FileUrlReader": 100,
    "ioshim.providers.file.FileUrlWriter": 100,
    "ioshim.providers.file.FileUrlAppender": 100,
    "ioshim.providers.file.PathReader": 110,
    "ioshim.providers.file.PathWriter": 110,
    "ioshim.providers.file.PathAppender": 110,
    "ioshim.providers.http.HttpUrlReader": 200,
    "ioshim.providers.process.ProcessReader": 300,
    "ioshim.providers.process.ProcessWriter": 300,
    "ioshim.providers.sockets.SocketReader": 400,
    "ioshim.providers.sockets.SocketWriter": 400,
    "ioshim.providers.std.StdinReader": 500,
    "ioshim.providers.std.StdoutWriter": 500,
    "ioshim.providers.std.StderrWriter": 500,
    "ioshim.providers.structural.StructuralReader": 900,
    "ioshim.providers.structural.StructuralWriter": 900,
}
