"""Array and object views that read and edit a JSON value in place."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple, Union, overload

from .value import Value


def _resolve(value: Any) -> Value:
    if isinstance(value, Value):
        return value
    as_value = getattr(value, "as_value", None)
    if callable(as_value):
        node = as_value()
        if isinstance(node, Value):
            return node
    raise TypeError(f"expected a JSON value, got {type(value).__name__}")


def _require_value(item: Any) -> Value:
    if not isinstance(item, Value):
        raise TypeError(f"expected a Value, got {type(item).__name__}")
    return item


def _check_additional(additional: int) -> int:
    if additional < 0:
        raise ValueError("additional capacity must not be negative")
    return additional


class Object:
    """A view of a JSON object value; changes go straight to the value."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        node = _resolve(value)
        if not node.is_object():
            raise TypeError("value is not a JSON object")
        self._value = node

    @property
    def value(self) -> Value:
        """The object value this view edits."""
        return self._value

    @property
    def _members(self) -> List[Tuple[str, Value]]:
        if not self._value.is_object():
            raise TypeError("value is no longer a JSON object")
        return self._value._data

    def capacity(self) -> int:
        return self._value._capacity if self._value.is_object() else 0

    def is_empty(self) -> bool:
        return not self._members

    def contains_key(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Optional[Value]:
        """Return the value of the first member named ``key``, or None."""
        return next((v for k, v in self._members if k == key), None)

    def _offset(self, key: str) -> Optional[int]:
        return next(
            (pos for pos, (k, _) in enumerate(self._members) if k == key), None
        )

    def _grow(self, additional: int) -> None:
        new_cap = len(self._members) + additional
        if new_cap > self._value._capacity:
            self._value._capacity = new_cap

    def insert(self, key: str, value: Value) -> Optional[Value]:
        """Set ``key`` to ``value``; return the replaced value, or None if new."""
        value = _require_value(value)
        members = self._members
        position = self._offset(key)
        if position is not None:
            old = members[position][1]
            members[position] = (members[position][0], value)
            return old
        self._grow(1)
        members.append((str(key), value))
        return None

    def remove(self, key: str) -> Optional[Value]:
        """Remove the first member named ``key`` and return its value."""
        position = self._offset(key)
        if position is None:
            return None
        return self._members.pop(position)[1]

    def pop(self) -> Optional[Value]:
        """Remove the last member and return its value, or None if empty."""
        members = self._members
        if not members:
            return None
        return members.pop()[1]

    def reserve(self, additional: int) -> None:
        """Make room for at least ``additional`` more members."""
        self._grow(_check_additional(additional))

    def items(self) -> Iterator[Tuple[str, Value]]:
        """Iterate over ``(key, value)`` pairs in order."""
        return iter(list(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter([k for k, _ in self._members])

    def __repr__(self) -> str:
        return f"Object({self._value!r})"


class Array:
    """A view of a JSON array value; changes go straight to the value."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        node = _resolve(value)
        if not node.is_array():
            raise TypeError("value is not a JSON array")
        self._value = node

    @property
    def value(self) -> Value:
        """The array value this view edits."""
        return self._value

    @property
    def _items(self) -> List[Value]:
        if not self._value.is_array():
            raise TypeError("value is no longer a JSON array")
        return self._value._data

    def capacity(self) -> int:
        return self._value._capacity if self._value.is_array() else 0

    def is_empty(self) -> bool:
        return not self._items

    def _grow(self, additional: int) -> None:
        new_cap = len(self._items) + additional
        if new_cap > self._value._capacity:
            self._value._capacity = new_cap

    def push(self, value: Value) -> None:
        """Append an element."""
        value = _require_value(value)
        self._grow(1)
        self._items.append(value)

    def pop(self) -> Optional[Value]:
        """Remove and return the last element, or None if empty."""
        items = self._items
        if not items:
            return None
        return items.pop()

    def reserve(self, additional: int) -> None:
        """Make room for at least ``additional`` more elements."""
        self._grow(_check_additional(additional))

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> Value: ...

    @overload
    def __getitem__(self, index: slice) -> List[Value]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Value, List[Value]]:
        if isinstance(index, bool):
            raise TypeError("array index must be an int or a slice")
        try:
            return self._items[index]
        except IndexError:
            raise IndexError(f"index {index} out of range") from None

    def __setitem__(self, index: int, value: Value) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("array index must be an int")
        value = _require_value(value)
        items = self._items
        try:
            items[index] = value
        except IndexError:
            raise IndexError(f"index {index} out of range") from None

    def __iter__(self) -> Iterator[Value]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Array({self._value!r})"


def as_array(value: Any) -> Optional[Array]:
    """Return an array view of ``value``, or None if it is not an array."""
    node = _resolve(value)
    return Array(node) if node.is_array() else None


def as_object(value: Any) -> Optional[Object]:
    """Return an object view of ``value``, or None if it is not an object."""
    node = _resolve(value)
    return Object(node) if node.is_object() else None