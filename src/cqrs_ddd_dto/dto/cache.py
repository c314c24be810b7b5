"""ValidationCache — raw input plus a lazily filled, memoized validated slot."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

_UNSET: object = object()


class ValidationCache(Generic[T]):
    """Holds the raw input of one DTO and memoizes its validated form.

    The first successful :meth:`get_or_validate` stores the result; later
    calls return the same object without running validation again. A failed
    validation leaves the slot empty, so the next call retries.
    Concurrent first calls are serialized on a lock and converge on a
    single validation run.
    """

    __slots__ = ("_lock", "_raw", "_value")

    def __init__(self, raw: object) -> None:
        self._raw = raw
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def raw(self) -> object:
        return self._raw

    @property
    def is_validated(self) -> bool:
        return self._value is not _UNSET

    def get_or_validate(self, validate: Callable[[object], T]) -> T:
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]

        with self._lock:
            if self._value is _UNSET:
                self._value = validate(self._raw)
            return self._value  # type: ignore[return-value]
