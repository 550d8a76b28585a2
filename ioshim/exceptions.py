"""
ioshim exceptions

Every failure the layer itself reports derives from :exc:`StreamError`, which
is also the category captured by default under the ``ReturnResult`` strategy.
"""

from __future__ import annotations

import errno
from typing import Any
from urllib.error import HTTPError

# Internal


class NotConfigured(Exception):
    """Indicates a provider disabled itself for the current settings"""


# Taxonomy


class StreamError(Exception):
    """Base class for failures reported by ioshim"""


class ResourceUnavailable(StreamError, OSError):
    """The native open of a resource failed.

    The native exception is kept as ``__cause__``; ``errno``, ``strerror``
    and ``filename`` are copied from it when it is an :exc:`OSError`.
    """

    def __init__(self, *args: Any, resource: Any = None):
        super().__init__(*args)
        self.resource = resource

    @classmethod
    def from_native(cls, exc: BaseException, resource: Any = None) -> ResourceUnavailable:
        """Build the most specific subclass matching the native error ``exc``."""
        subcls = _classify(exc)
        if isinstance(exc, HTTPError):
            error = subcls(exc.code, str(exc.reason), exc.url, resource=resource)
        elif isinstance(exc, OSError) and exc.errno is not None:
            error = subcls(exc.errno, exc.strerror, exc.filename, resource=resource)
        else:
            error = subcls(str(exc) or exc.__class__.__name__, resource=resource)
        error.__cause__ = exc
        return error


class ResourceNotFound(ResourceUnavailable):
    """The resource does not exist (missing file, HTTP 404)"""


class ResourcePermissionDenied(ResourceUnavailable):
    """The resource exists but may not be opened"""


class ResourceRefused(ResourceUnavailable):
    """The remote end refused the connection"""


class AlreadyClosed(StreamError, ValueError):
    """An operation was attempted on a closed handle"""


class UnsupportedResourceType(StreamError, TypeError):
    """No provider is registered for the resource, element type and direction"""


class AmbiguousElementType(UnsupportedResourceType):
    """Several element types are available and none of them is preferred"""


def _classify(exc: BaseException) -> type[ResourceUnavailable]:
    if isinstance(exc, HTTPError):
        if exc.code in (404, 410):
            return ResourceNotFound
        if exc.code in (401, 403):
            return ResourcePermissionDenied
        return ResourceUnavailable
    reason = getattr(exc, "reason", None)
    if isinstance(reason, OSError):
        # urllib wraps socket errors in URLError.reason
        exc = reason
    if isinstance(exc, FileNotFoundError):
        return ResourceNotFound
    if isinstance(exc, PermissionError):
        return ResourcePermissionDenied
    if isinstance(exc, ConnectionRefusedError):
        return ResourceRefused
    if isinstance(exc, OSError) and exc.errno == errno.ENOENT:
        return ResourceNotFound
    return ResourceUnavailable
