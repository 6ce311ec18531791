"""Generic key/value property store owned by a player."""
from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Number
from typing import Callable, Dict, Hashable, List

from playerskills.domain.errors import PropertyError

PropertyListener = Callable[[Hashable, object, object], None]


class StoredProperty(ABC):
    """A stored object that exposes a scalar value to the property store.

    Writes to a key holding a ``StoredProperty`` update the object in place
    instead of replacing it.
    """

    __slots__ = ()

    @abstractmethod
    def get_value(self) -> object:
        raise NotImplementedError

    @abstractmethod
    def set_value(self, value: object) -> None:
        raise NotImplementedError


class PropertyStore:
    """Holds player properties and notifies listeners when they change."""

    def __init__(self) -> None:
        self._values: Dict[Hashable, object] = {}
        self._listeners: Dict[Hashable, List[PropertyListener]] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._values

    def keys(self) -> list[Hashable]:
        return list(self._values.keys())

    def register(self, key: Hashable, value: object) -> None:
        """Add a new property without notifying listeners."""
        if key in self._values:
            raise PropertyError(f"Property '{key}' is already registered.")
        self._values[key] = value

    def remove(self, key: Hashable) -> object:
        """Drop ``key`` and return what was stored, without notifying listeners."""
        try:
            return self._values.pop(key)
        except KeyError as exc:
            raise PropertyError(f"Property '{key}' is not registered.") from exc

    def get(self, key: Hashable, default: object = None) -> object:
        """Return the raw stored object for ``key``."""
        return self._values.get(key, default)

    def value(self, key: Hashable, default: object = None) -> object:
        """Return the scalar value for ``key``, unwrapping stored properties."""
        stored = self._values.get(key, default)
        if isinstance(stored, StoredProperty):
            return stored.get_value()
        return stored

    def set(self, key: Hashable, value: object) -> None:
        """Overwrite the value for ``key``."""
        old = self.value(key)
        stored = self._values.get(key)
        if isinstance(stored, StoredProperty):
            stored.set_value(value)
        else:
            self._values[key] = value
        self._notify(key, old, self.value(key))

    def add(self, key: Hashable, amount: object) -> None:
        """Accumulate ``amount`` onto the value for ``key``."""
        if key not in self._values:
            self._values[key] = amount
            self._notify(key, None, amount)
            return
        old = self.value(key)
        if not isinstance(old, Number) or not isinstance(amount, Number):
            raise PropertyError(f"Cannot add {amount!r} to property '{key}' holding {old!r}.")
        stored = self._values[key]
        if isinstance(stored, StoredProperty):
            stored.set_value(old + amount)
        else:
            self._values[key] = old + amount
        self._notify(key, old, self.value(key))

    def subscribe(self, key: Hashable, listener: PropertyListener) -> None:
        self._listeners.setdefault(key, []).append(listener)

    def unsubscribe(self, key: Hashable, listener: PropertyListener) -> None:
        listeners = self._listeners.get(key, [])
        if listener in listeners:
            listeners.remove(listener)

    def _notify(self, key: Hashable, old: object, new: object) -> None:
        for listener in list(self._listeners.get(key, [])):
            listener(key, old, new)
