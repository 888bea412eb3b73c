"""JSON value kinds and the shared interface of JSON value views."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Iterable, Optional, Union

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1
U64_MAX = (1 << 64) - 1

Number = Union[int, float]


class JsonType(IntEnum):
    """The kind of a JSON value, with its fixed numeric code."""

    Null = 0
    Boolean = 1
    Number = 2
    String = 3
    Object = 4
    Array = 5
    Raw = 6

    @classmethod
    def _missing_(cls, value: object) -> "JsonType":
        raise ValueError(f"invalid JsonType value: {value}")


def _is_integer(number: object) -> bool:
    return isinstance(number, int) and not isinstance(number, bool)


class JsonValue(ABC):
    """Read-only interface shared by every JSON value view.

    Subclasses supply the type, the scalar accessors, indexing and pointer
    lookup; the predicates and numeric conversions follow from those.
    """

    @abstractmethod
    def get_type(self) -> JsonType:
        """Return the kind of this value."""

    @abstractmethod
    def as_number(self) -> Optional[Number]:
        """Return the number held, or None if this is not a number."""

    @abstractmethod
    def as_str(self) -> Optional[str]:
        """Return the string held, or None if this is not a string."""

    @abstractmethod
    def as_bool(self) -> Optional[bool]:
        """Return the boolean held, or None if this is not a boolean."""

    @abstractmethod
    def get(self, index: Union[int, str]) -> Any:
        """Return the element at an array index or object key, or None."""

    @abstractmethod
    def pointer(self, path: Iterable[Union[int, str]]) -> Any:
        """Follow a path of keys and indices; return None if it leads nowhere."""

    def is_boolean(self) -> bool:
        return self.get_type() == JsonType.Boolean

    def is_true(self) -> bool:
        return bool(self.as_bool())

    def is_false(self) -> bool:
        return not self.is_true()

    def is_null(self) -> bool:
        return self.get_type() == JsonType.Null

    def is_number(self) -> bool:
        return self.get_type() == JsonType.Number

    def is_str(self) -> bool:
        return self.get_type() == JsonType.String

    def is_array(self) -> bool:
        return self.get_type() == JsonType.Array

    def is_object(self) -> bool:
        return self.get_type() == JsonType.Object

    def is_f64(self) -> bool:
        return self.as_f64() is not None

    def is_i64(self) -> bool:
        return self.as_i64() is not None

    def is_u64(self) -> bool:
        return self.as_u64() is not None

    def as_i64(self) -> Optional[int]:
        """Return the number as a signed 64-bit integer if it fits."""
        number = self.as_number()
        if _is_integer(number) and I64_MIN <= number <= I64_MAX:
            return int(number)
        return None

    def as_u64(self) -> Optional[int]:
        """Return the number as an unsigned 64-bit integer if it fits."""
        number = self.as_number()
        if _is_integer(number) and 0 <= number <= U64_MAX:
            return int(number)
        return None

    def as_f64(self) -> Optional[float]:
        """Return the number as a float, converting integers."""
        number = self.as_number()
        if number is None:
            return None
        return float(number)