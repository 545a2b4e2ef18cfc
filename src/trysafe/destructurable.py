"""
Destructurable — one value, two ways to read it.

A Destructurable exposes the same data through named fields and through
positional unpacking:

    >>> d = create_destructurable({"data": 1, "error": None}, (1, None))
    >>> d.data, d["error"]
    (1, None)
    >>> data, error = d
    >>> dict(d)
    {'data': 1, 'error': None}

Iteration walks the positional items. keys() together with string indexing
walks the named fields, so dict(d) copies only the fields and never the
iteration machinery. Instances are read-only.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, KeysView, Mapping
from types import MappingProxyType
from typing import Any

from trysafe.errors import ReadOnlyError


class Destructurable:
    """
    Read-only record that also unpacks as a fixed-size sequence.

    Not a dict, so the json module does not serialize it directly. Use
    to_dict(), or pass it as the `default` hook, to get the named fields only:

        json.dumps(outcome.to_dict())
        json.dumps(payload, default=Destructurable.to_dict)
    """

    __slots__ = ("_fields", "_items")

    _fields: Mapping[str, Any]
    _items: tuple[Any, ...]

    def __init__(self, fields: Mapping[str, Any], items: Iterable[Any]) -> None:
        object.__setattr__(self, "_fields", MappingProxyType(dict(fields)))
        object.__setattr__(self, "_items", tuple(items))

    # ──────────────────────── Field access ────────────────────────

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; slots are never proxied.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._fields[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no field {name!r}"
            ) from None

    def keys(self) -> KeysView[str]:
        """Names of the fields, in construction order."""
        return self._fields.keys()

    def to_dict(self) -> dict[str, Any]:
        """Shallow copy of the named fields."""
        return dict(self._fields)

    # ──────────────────────── Positional access ────────────────────────

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, key: str | int | slice) -> Any:
        if isinstance(key, str):
            return self._fields[key]
        return self._items[key]

    # ──────────────────────── Immutability ────────────────────────

    def __setattr__(self, name: str, value: Any) -> None:
        raise ReadOnlyError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise ReadOnlyError(f"{type(self).__name__} is read-only")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (dict(self._fields), self._items))

    # ──────────────────────── Dunder methods ────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Destructurable):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._fields == other._fields
            and self._items == other._items
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._fields.items())
        return f"{type(self).__name__}({fields})"


def create_destructurable(
    fields: Mapping[str, Any], items: Iterable[Any]
) -> Destructurable:
    """
    Build a value readable both as `fields` and as the ordered `items`.

    The caller is responsible for `fields` and `items` describing the same
    values; both are copied, so later changes to the inputs are not seen.
    """
    return Destructurable(fields, items)
