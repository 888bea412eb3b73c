"""A JSON value node: scalars, strings, arrays and objects."""

from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple, Union

from .types import I64_MAX, I64_MIN, U64_MAX, JsonType, JsonValue, Number

Index = Union[int, str]


class _Kind(Enum):
    NULL = "null"
    FALSE = "false"
    TRUE = "true"
    UNSIGNED = "unsigned"
    SIGNED = "signed"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


_JSON_TYPES = {
    _Kind.NULL: JsonType.Null,
    _Kind.FALSE: JsonType.Boolean,
    _Kind.TRUE: JsonType.Boolean,
    _Kind.UNSIGNED: JsonType.Number,
    _Kind.SIGNED: JsonType.Number,
    _Kind.FLOAT: JsonType.Number,
    _Kind.STRING: JsonType.String,
    _Kind.ARRAY: JsonType.Array,
    _Kind.OBJECT: JsonType.Object,
}


class Value(JsonValue):
    """A mutable node in a JSON document tree.

    Arrays keep their elements as a list of values; objects keep an ordered
    list of ``(key, value)`` pairs, so duplicate keys survive and lookups
    return the first match.
    """

    __slots__ = ("_kind", "_data", "_capacity")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._kind: _Kind = _Kind.NULL
        self._data: Any = None
        self._capacity: int = 0

    @classmethod
    def _make(cls, kind: _Kind, data: Any = None, capacity: int = 0) -> "Value":
        node = cls()
        node._kind = kind
        node._data = data
        node._capacity = capacity
        return node

    # construction

    @classmethod
    def null(cls) -> "Value":
        """Return a null value."""
        return cls()

    @classmethod
    def from_bool(cls, val: bool) -> "Value":
        return cls._make(_Kind.TRUE if val else _Kind.FALSE)

    @classmethod
    def from_i64(cls, val: int) -> "Value":
        """Return a signed integer value; raise OverflowError outside i64."""
        if not I64_MIN <= val <= I64_MAX:
            raise OverflowError(f"{val} does not fit in a signed 64-bit integer")
        return cls._make(_Kind.SIGNED, int(val))

    @classmethod
    def from_u64(cls, val: int) -> "Value":
        """Return an unsigned integer value; raise OverflowError outside u64."""
        if not 0 <= val <= U64_MAX:
            raise OverflowError(f"{val} does not fit in an unsigned 64-bit integer")
        return cls._make(_Kind.UNSIGNED, int(val))

    @classmethod
    def from_f64(cls, val: float) -> Optional["Value"]:
        """Return a float value, or None if ``val`` is NaN or infinite."""
        val = float(val)
        if not math.isfinite(val):
            return None
        return cls._make(_Kind.FLOAT, val)

    @classmethod
    def from_str(cls, val: str) -> "Value":
        return cls._make(_Kind.STRING, str(val))

    @classmethod
    def new_object(cls) -> "Value":
        return cls._make(_Kind.OBJECT, [])

    @classmethod
    def new_array(cls) -> "Value":
        return cls._make(_Kind.ARRAY, [])

    @classmethod
    def _array_of(cls, items: Iterable["Value"]) -> "Value":
        children = list(items)
        return cls._make(_Kind.ARRAY, children, len(children))

    @classmethod
    def _object_of(cls, pairs: Iterable[Tuple[str, "Value"]]) -> "Value":
        children = [(str(k), v) for k, v in pairs]
        return cls._make(_Kind.OBJECT, children, len(children))

    @classmethod
    def _from_python(cls, obj: Any) -> "Value":
        """Build a value tree from plain Python data."""
        if obj is None:
            return cls.null()
        if isinstance(obj, bool):
            return cls.from_bool(obj)
        if isinstance(obj, int):
            return cls.from_u64(obj) if obj >= 0 else cls.from_i64(obj)
        if isinstance(obj, float):
            node = cls.from_f64(obj)
            if node is None:
                raise ValueError(f"JSON does not support the number {obj!r}")
            return node
        if isinstance(obj, str):
            return cls.from_str(obj)
        if isinstance(obj, dict):
            return cls._object_of((k, cls._from_python(v)) for k, v in obj.items())
        if isinstance(obj, (list, tuple)):
            return cls._array_of(cls._from_python(v) for v in obj)
        raise TypeError(f"cannot convert {type(obj).__name__} to a JSON value")

    # reading

    def get_type(self) -> JsonType:
        return _JSON_TYPES[self._kind]

    def as_number(self) -> Optional[Number]:
        if self._kind in (_Kind.UNSIGNED, _Kind.SIGNED, _Kind.FLOAT):
            return self._data
        return None

    def as_i64(self) -> Optional[int]:
        if self._kind is _Kind.SIGNED:
            return self._data
        if self._kind is _Kind.UNSIGNED and self._data <= I64_MAX:
            return self._data
        return None

    def as_u64(self) -> Optional[int]:
        if self._kind is _Kind.UNSIGNED:
            return self._data
        if self._kind is _Kind.SIGNED and self._data >= 0:
            return self._data
        return None

    def as_f64(self) -> Optional[float]:
        if self._kind in (_Kind.UNSIGNED, _Kind.SIGNED, _Kind.FLOAT):
            return float(self._data)
        return None

    def as_bool(self) -> Optional[bool]:
        if self._kind is _Kind.TRUE:
            return True
        if self._kind is _Kind.FALSE:
            return False
        return None

    def as_str(self) -> Optional[str]:
        return self._data if self._kind is _Kind.STRING else None

    def get(self, index: Index) -> Optional["Value"]:
        """Return the array element or object member, or None if absent."""
        if isinstance(index, bool):
            raise TypeError("index must be an int or a str")
        if isinstance(index, str):
            if self._kind is not _Kind.OBJECT:
                return None
            return next((v for k, v in self._data if k == index), None)
        if isinstance(index, int):
            if self._kind is not _Kind.ARRAY or not 0 <= index < len(self._data):
                return None
            return self._data[index]
        raise TypeError("index must be an int or a str")

    def pointer(self, path: Iterable[Index]) -> Optional["Value"]:
        """Follow keys and indices from this node; None if any step is missing."""
        if isinstance(path, (str, int)):
            path = (path,)
        node: Optional[Value] = self
        for step in path:
            node = node.get(step)
            if node is None:
                return None
        return node

    def __getitem__(self, index: Index) -> "Value":
        found = self.get(index)
        if found is None:
            if isinstance(index, str):
                raise KeyError(index)
            raise IndexError(f"index {index} out of range")
        return found

    # mutation

    def take(self) -> "Value":
        """Move the contents out into a new value, leaving this one null."""
        moved = Value._make(self._kind, self._data, self._capacity)
        self._kind = _Kind.NULL
        self._data = None
        self._capacity = 0
        return moved

    # conversion

    def to_python(self) -> Any:
        """Return plain Python data; later duplicate object keys win."""
        kind = self._kind
        if kind is _Kind.NULL:
            return None
        if kind is _Kind.TRUE:
            return True
        if kind is _Kind.FALSE:
            return False
        if kind is _Kind.ARRAY:
            return [child.to_python() for child in self._data]
        if kind is _Kind.OBJECT:
            return {k: v.to_python() for k, v in self._data}
        return self._data

    def _write(self, out: List[str]) -> None:
        kind = self._kind
        if kind is _Kind.NULL:
            out.append("null")
        elif kind is _Kind.TRUE:
            out.append("true")
        elif kind is _Kind.FALSE:
            out.append("false")
        elif kind in (_Kind.UNSIGNED, _Kind.SIGNED):
            out.append(str(self._data))
        elif kind is _Kind.FLOAT:
            out.append(json.dumps(self._data))
        elif kind is _Kind.STRING:
            out.append(json.dumps(self._data, ensure_ascii=False))
        elif kind is _Kind.ARRAY:
            out.append("[")
            for position, child in enumerate(self._data):
                if position:
                    out.append(",")
                child._write(out)
            out.append("]")
        else:
            out.append("{")
            for position, (key, child) in enumerate(self._data):
                if position:
                    out.append(",")
                out.append(json.dumps(key, ensure_ascii=False))
                out.append(":")
                child._write(out)
            out.append("}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self.get_type() != other.get_type():
            return False
        kind = self._kind
        if kind in (_Kind.UNSIGNED, _Kind.SIGNED, _Kind.FLOAT):
            if (kind is _Kind.FLOAT) != (other._kind is _Kind.FLOAT):
                return False
            return self._data == other._data
        if kind is _Kind.ARRAY:
            return self._data == other._data
        if kind is _Kind.OBJECT:
            if len(self._data) != len(other._data):
                return False
            if {k for k, _ in self._data} != {k for k, _ in other._data}:
                return False
            return all(other.get(k) == v for k, v in self._data)
        if kind in (_Kind.TRUE, _Kind.FALSE):
            return self._kind is other._kind
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Value({to_string(self)})"


def to_string(value: Any) -> str:
    """Serialize a value, or anything offering ``as_value()``, to compact JSON."""
    node = value if isinstance(value, Value) else value.as_value()
    out: List[str] = []
    node._write(out)
    return "".join(out)