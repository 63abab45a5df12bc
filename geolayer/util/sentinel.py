# Copyright (c) 2018-2025 by xcube team and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class _Sentinel:
    """A named singleton value that is distinct from ``None``."""

    def __init__(self, name: str):
        self._name = name
        self._hash_code = hash(name) + 1

    def __str__(self):
        return self._name

    def __repr__(self):
        return self._name

    def __eq__(self, other):
        return self is other or (
            isinstance(other, _Sentinel) and other._name == self._name
        )

    def __hash__(self) -> int:
        return self._hash_code

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


#: Singleton value used to indicate an argument that has not been passed.
UNDEFINED = _Sentinel("UNDEFINED")

#: Singleton value used to indicate a cache slot without a value.
UNRESOLVED = _Sentinel("UNRESOLVED")


class CacheSlot(Generic[T]):
    """A slot that is either unresolved or holds a resolved value.

    In contrast to using ``None`` as marker, a slot can hold
    ``None`` as a legitimate resolved value.

    Args:
        name: Name of the slot, used in log and error messages.
    """

    def __init__(self, name: str):
        self._name = name
        self._value: Any = UNRESOLVED

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_resolved(self) -> bool:
        return self._value is not UNRESOLVED

    @property
    def value(self) -> T:
        """The resolved value.
        Raises ``LookupError`` if the slot is unresolved.
        """
        if self._value is UNRESOLVED:
            raise LookupError(f"{self._name} is unresolved")
        return self._value

    def get(self, default: Any = None) -> Any:
        """Get the resolved value or *default*, if unresolved."""
        return default if self._value is UNRESOLVED else self._value

    def set(self, value: T):
        self._value = value

    def clear(self):
        self._value = UNRESOLVED

    def resolve(self, resolver: Callable[[], T]) -> T:
        """Get the resolved value. If unresolved, compute it
        using *resolver* and keep it.
        """
        if self._value is UNRESOLVED:
            self._value = resolver()
        return self._value

    def __repr__(self):
        return f"CacheSlot({self._name!r}, {self._value!r})"
