from __future__ import annotations

from collections.abc import Iterator, Mapping
from importlib import import_module
from typing import TYPE_CHECKING, Any, Union, cast

from ioshim.settings import default_settings

_SettingsKeyT = Union[bool, float, int, str, None]

if TYPE_CHECKING:
    from types import ModuleType

    from _typeshed import SupportsItems

    _SettingsInputT = Union[SupportsItems[_SettingsKeyT, Any], None]


SETTINGS_PRIORITIES: dict[str, int] = {
    "default": 0,
    "project": 20,
    "cmdline": 40,
}


def get_settings_priority(priority: int | str) -> int:
    """
    Look up a string priority in :attr:`SETTINGS_PRIORITIES` and return its
    numerical value, or return a numerical priority unchanged.
    """
    if isinstance(priority, str):
        return SETTINGS_PRIORITIES[priority]
    return priority


class SettingsAttribute:
    """A setting value along with the priority it was set with."""

    def __init__(self, value: Any, priority: int):
        self.value: Any = value
        self.priority: int = priority

    def set(self, value: Any, priority: int) -> None:
        """Sets value if priority is higher or equal than current priority."""
        if priority >= self.priority:
            if isinstance(self.value, BaseSettings):
                value = BaseSettings(value, priority=priority)
            self.value = value
            self.priority = priority

    def __repr__(self) -> str:
        return f"<SettingsAttribute value={self.value!r} priority={self.priority}>"


class BaseSettings(Mapping[_SettingsKeyT, Any]):
    """
    Mapping storing a priority along with each value.

    A value is only replaced by one set with an equal or higher priority, so
    defaults, project settings and command-line overrides can be applied in
    any order.
    """

    def __init__(self, values: _SettingsInputT = None, priority: int | str = "project"):
        self.attributes: dict[_SettingsKeyT, SettingsAttribute] = {}
        if values:
            self.update(values, priority)

    def __getitem__(self, opt_name: _SettingsKeyT) -> Any:
        if opt_name not in self:
            return None
        return self.attributes[opt_name].value

    def __contains__(self, name: Any) -> bool:
        return name in self.attributes

    def __iter__(self) -> Iterator[_SettingsKeyT]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def get(self, name: _SettingsKeyT, default: Any = None) -> Any:
        return self[name] if self[name] is not None else default

    def getbool(self, name: _SettingsKeyT, default: bool = False) -> bool:
        """
        Get a setting value as a boolean.

        ``1``, ``'1'``, ``True`` and ``'True'`` return ``True``,
        while ``0``, ``'0'``, ``False``, ``'False'`` and ``None`` return ``False``.
        """
        got = self.get(name, default)
        try:
            return bool(int(got))
        except ValueError:
            if got in ("True", "true"):
                return True
            if got in ("False", "false"):
                return False
            raise ValueError(
                "Supported values for boolean settings "
                "are 0/1, True/False, '0'/'1', "
                "'True'/'False' and 'true'/'false'"
            )

    def getint(self, name: _SettingsKeyT, default: int = 0) -> int:
        return int(self.get(name, default))

    def getfloat(self, name: _SettingsKeyT, default: float = 0.0) -> float:
        return float(self.get(name, default))

    def getwithbase(self, name: _SettingsKeyT) -> BaseSettings:
        """Get a composition of a dictionary-like setting and its `_BASE`
        counterpart.
        """
        if not isinstance(name, str):
            raise ValueError(f"Base setting key must be a string, got {name}")
        compbs = BaseSettings()
        compbs.update(self[name + "_BASE"])
        compbs.update(self[name])
        return compbs

    def getpriority(self, name: _SettingsKeyT) -> int | None:
        if name not in self:
            return None
        return self.attributes[name].priority

    def __setitem__(self, name: _SettingsKeyT, value: Any) -> None:
        self.set(name, value)

    def set(
        self, name: _SettingsKeyT, value: Any, priority: int | str = "project"
    ) -> None:
        """
        Store a key/value attribute with a given priority, a key of
        :attr:`SETTINGS_PRIORITIES` or an integer.
        """
        priority = get_settings_priority(priority)
        if name not in self:
            self.attributes[name] = SettingsAttribute(value, priority)
        else:
            self.attributes[name].set(value, priority)

    def setmodule(
        self, module: ModuleType | str, priority: int | str = "project"
    ) -> None:
        """
        Store every uppercase global of ``module`` (a module or its import
        path) with the given priority.
        """
        if isinstance(module, str):
            module = import_module(module)
        for key in dir(module):
            if key.isupper():
                self.set(key, getattr(module, key), priority)

    def update(self, values: _SettingsInputT, priority: int | str = "project") -> None:
        """
        Store key/value pairs with a given priority.

        For a :class:`BaseSettings` instance the per-key priorities are kept
        and ``priority`` is ignored.
        """
        if values is None:
            return
        if isinstance(values, BaseSettings):
            for name, value in values.items():
                self.set(name, value, cast(int, values.getpriority(name)))
        else:
            for name, value in values.items():
                self.set(name, value, priority)


class Settings(BaseSettings):
    """
    :class:`BaseSettings` populated with the defaults from
    :mod:`ioshim.settings.default_settings`.
    """

    def __init__(self, values: _SettingsInputT = None, priority: int | str = "project"):
        # user values are applied after the dict defaults are promoted
        super().__init__()
        self.setmodule(default_settings, "default")
        # per-key priorities inside dictionary settings
        for name, val in self.items():
            if isinstance(val, dict):
                self.set(name, BaseSettings(val, "default"), "default")
        self.update(values, priority)
