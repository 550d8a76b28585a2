from __future__ import annotations

import logging
import sys
from logging.config import dictConfig
from typing import TYPE_CHECKING, Any

from ioshim.settings import Settings

if TYPE_CHECKING:
    from ioshim.settings import BaseSettings


DEFAULT_LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "loggers": {
        "ioshim": {"level": "DEBUG"},
    },
}

_ioshim_root_handler: logging.Handler | None = None


class TopLevelFormatter(logging.Filter):
    """Keep only the top level name of the given loggers in log records.

    Since it can't be set for just one logger (it won't propagate for its
    children), it's going to be set in the root handler, with a parametrized
    ``loggers`` list where it should act.
    """

    def __init__(self, loggers: list[str] | None = None):
        super().__init__()
        self.loggers: list[str] = loggers or []

    def filter(self, record: logging.LogRecord) -> bool:
        if any(record.name.startswith(logger + ".") for logger in self.loggers):
            record.name = record.name.split(".", 1)[0]
        return True


def configure_logging(
    settings: BaseSettings | dict[str, Any] | None = None,
    install_root_handler: bool = True,
) -> None:
    """
    Initialize logging defaults for ioshim.

    :param settings: settings used to create and configure a handler for the
        root logger (default: None).
    :type settings: dict, :class:`~ioshim.settings.Settings` object or ``None``

    :param install_root_handler: whether to install root logging handler
        (default: True)
    :type install_root_handler: bool

    This function does:

    - Route warnings to the Python logging system
    - Assign DEBUG level to the ioshim logger
    - Install a root handler built from the ``LOG_*`` settings

    When ``install_root_handler`` is True (default), this function also
    creates a handler for the root logger according to the ``LOG_*``
    settings. You can override default options using ``settings``
    argument. When ``settings`` is empty or None, defaults are used.
    """
    if not sys.warnoptions:
        # Route warnings through python logging
        logging.captureWarnings(True)

    dictConfig(DEFAULT_LOGGING)

    if isinstance(settings, dict) or settings is None:
        settings = Settings(settings)

    if install_root_handler:
        install_ioshim_root_handler(settings)


def install_ioshim_root_handler(settings: BaseSettings) -> None:
    global _ioshim_root_handler  # noqa: PLW0603

    _uninstall_ioshim_root_handler()
    logging.root.setLevel(logging.NOTSET)
    _ioshim_root_handler = _get_handler(settings)
    logging.root.addHandler(_ioshim_root_handler)


def _uninstall_ioshim_root_handler() -> None:
    global _ioshim_root_handler  # noqa: PLW0603

    if (
        _ioshim_root_handler is not None
        and _ioshim_root_handler in logging.root.handlers
    ):
        logging.root.removeHandler(_ioshim_root_handler)
    _ioshim_root_handler = None


def get_ioshim_root_handler() -> logging.Handler | None:
    return _ioshim_root_handler


def _get_handler(settings: BaseSettings) -> logging.Handler:
    """Return a log handler object according to settings"""
    filename = settings.get("LOG_FILE")
    handler: logging.Handler
    if filename:
        mode = "a" if settings.getbool("LOG_FILE_APPEND") else "w"
        encoding = settings.get("LOG_ENCODING")
        handler = logging.FileHandler(filename, mode=mode, encoding=encoding)
    elif settings.getbool("LOG_ENABLED"):
        handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()

    formatter = logging.Formatter(
        fmt=settings.get("LOG_FORMAT"), datefmt=settings.get("LOG_DATEFORMAT")
    )
    handler.setFormatter(formatter)
    handler.setLevel(settings.get("LOG_LEVEL"))
    if settings.getbool("LOG_SHORT_NAMES"):
        handler.addFilter(TopLevelFormatter(["ioshim"]))
    return handler
