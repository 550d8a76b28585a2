"""
This module contains general purpose URL functions not found in the standard
library.
"""

from urllib.parse import quote_plus, unquote_plus


def url_encode(s: str, encoding: str = "utf-8") -> str:
    """Encode ``s`` for use in a query string or form body, spaces as ``+``.

    >>> url_encode("a b&c=d")
    'a+b%26c%3Dd'
    """
    return quote_plus(s, encoding=encoding)


def url_decode(s: str, encoding: str = "utf-8") -> str:
    """Inverse of :func:`url_encode`.

    >>> url_decode("a+b%26c%3Dd")
    'a b&c=d'
    """
    return unquote_plus(s, encoding=encoding)
