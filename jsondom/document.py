"""Parsing JSON text into an owned document tree."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from json.decoder import scanstring
from typing import Any, Iterable, List, Optional, Union

from .containers import Array, Object, as_array, as_object
from .types import I64_MIN, U64_MAX, JsonType, JsonValue, Number
from .value import Value, to_string
from .visitor import JsonVisitor

Index = Union[int, str]

_WHITESPACE = " \t\n\r"
_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")


class DocumentBuilder(JsonVisitor):
    """A visitor that assembles parse events into a value tree.

    Values are kept on a flat list; each open container records where it
    starts, and on its end event the children after it are folded into it.
    """

    def __init__(self) -> None:
        self._nodes: List[Value] = []
        self._parents: List[int] = []

    def _push(self, node: Value) -> bool:
        self._nodes.append(node)
        return True

    def _open(self, node: Value) -> bool:
        self._nodes.append(node)
        self._parents.append(len(self._nodes) - 1)
        return True

    def _take_children(self, count: int) -> Optional[List[Value]]:
        if not self._parents:
            return None
        start = self._parents[-1]
        children = self._nodes[start + 1:]
        if len(children) != count:
            return None
        self._parents.pop()
        del self._nodes[start:]
        return children

    def visit_null(self) -> bool:
        return self._push(Value.null())

    def visit_bool(self, val: bool) -> bool:
        return self._push(Value.from_bool(val))

    def visit_u64(self, val: int) -> bool:
        return self._push(Value.from_u64(val))

    def visit_i64(self, val: int) -> bool:
        return self._push(Value.from_i64(val))

    def visit_f64(self, val: float) -> bool:
        node = Value.from_f64(val)
        return node is not None and self._push(node)

    def visit_str(self, value: str) -> bool:
        return self._push(Value.from_str(value))

    def visit_key(self, key: str) -> bool:
        return self.visit_str(key)

    def visit_array_start(self, hint: int) -> bool:
        return self._open(Value.new_array())

    def visit_array_end(self, length: int) -> bool:
        if not self._parents or not self._nodes[self._parents[-1]].is_array():
            return False
        children = self._take_children(length)
        if children is None:
            return False
        return self._push(Value._array_of(children))

    def visit_object_start(self, hint: int) -> bool:
        return self._open(Value.new_object())

    def visit_object_end(self, length: int) -> bool:
        if not self._parents or not self._nodes[self._parents[-1]].is_object():
            return False
        children = self._take_children(2 * length)
        if children is None:
            return False
        keys = children[0::2]
        if not all(key.is_str() for key in keys):
            return False
        pairs = [(key.as_str(), val) for key, val in zip(keys, children[1::2])]
        return self._push(Value._object_of(pairs))

    def finish(self) -> Value:
        """Return the single complete root value built so far."""
        if self._parents or len(self._nodes) != 1:
            raise ValueError("the events did not describe exactly one complete value")
        root = self._nodes.pop()
        return root


@dataclass
class _Frame:
    closer: str
    is_object: bool
    count: int = 0
    pending: bool = True


class _Parser:
    """Reads JSON text and reports it as events to a visitor."""

    def __init__(self, text: str, visitor: JsonVisitor) -> None:
        self._text = text
        self._visitor = visitor
        self._stack: List[_Frame] = []

    def _skip(self, pos: int) -> int:
        text = self._text
        while pos < len(text) and text[pos] in _WHITESPACE:
            pos += 1
        return pos

    @staticmethod
    def _error(message: str, pos: int) -> ValueError:
        return ValueError(f"{message} at position {pos}")

    def _emit(self, accepted: bool, pos: int) -> None:
        if not accepted:
            raise self._error("parsing stopped by the visitor", pos)

    def _completed(self) -> None:
        if self._stack:
            self._stack[-1].count += 1

    def run(self) -> None:
        text = self._text
        pos = self._value(self._skip(0))
        while self._stack:
            frame = self._stack[-1]
            pos = self._skip(pos)
            if frame.pending:
                frame.pending = False
                if frame.is_object:
                    pos = self._key(pos)
                pos = self._value(self._skip(pos))
                continue
            ch = text[pos:pos + 1]
            if ch == ",":
                frame.pending = True
                pos += 1
            elif ch == frame.closer:
                pos = self._close(pos)
            else:
                raise self._error(f"expected ',' or '{frame.closer}'", pos)
        pos = self._skip(pos)
        if pos != len(text):
            raise self._error("trailing characters after the JSON value", pos)

    def _close(self, pos: int) -> int:
        frame = self._stack.pop()
        visitor = self._visitor
        end = visitor.visit_object_end if frame.is_object else visitor.visit_array_end
        self._emit(end(frame.count), pos)
        self._completed()
        return pos + 1

    def _string(self, pos: int) -> tuple:
        return scanstring(self._text, pos + 1, True)

    def _key(self, pos: int) -> int:
        text = self._text
        if text[pos:pos + 1] != '"':
            raise self._error("expected an object key", pos)
        key, end = self._string(pos)
        self._emit(self._visitor.visit_key(key), pos)
        end = self._skip(end)
        if text[end:end + 1] != ":":
            raise self._error("expected ':'", end)
        return end + 1

    def _value(self, pos: int) -> int:
        text = self._text
        visitor = self._visitor
        ch = text[pos:pos + 1]
        if not ch:
            raise self._error("unexpected end of input", pos)
        if ch == '"':
            string, end = self._string(pos)
            self._emit(visitor.visit_str(string), pos)
            self._completed()
            return end
        if ch in "[{":
            is_object = ch == "{"
            closer = "}" if is_object else "]"
            start = visitor.visit_object_start if is_object else visitor.visit_array_start
            self._emit(start(0), pos)
            following = self._skip(pos + 1)
            if text[following:following + 1] == closer:
                end = visitor.visit_object_end if is_object else visitor.visit_array_end
                self._emit(end(0), following)
                self._completed()
                return following + 1
            self._stack.append(_Frame(closer, is_object))
            return following
        for word, event in (
            ("null", visitor.visit_null),
            ("true", lambda: visitor.visit_bool(True)),
            ("false", lambda: visitor.visit_bool(False)),
        ):
            if text.startswith(word, pos):
                self._emit(event(), pos)
                self._completed()
                return pos + len(word)
        match = _NUMBER.match(text, pos)
        if match is None:
            raise self._error("expected a JSON value", pos)
        self._number(match.group(0), match.group(1) or match.group(2), pos)
        self._completed()
        return match.end()

    def _number(self, token: str, is_float: Optional[str], pos: int) -> None:
        visitor = self._visitor
        if not is_float:
            number = int(token)
            if 0 <= number <= U64_MAX:
                self._emit(visitor.visit_u64(number), pos)
                return
            if I64_MIN <= number < 0:
                self._emit(visitor.visit_i64(number), pos)
                return
        real = float(token)
        if not math.isfinite(real):
            raise self._error("number out of range", pos)
        self._emit(visitor.visit_f64(real), pos)


class Document(JsonValue):
    """An owned JSON tree with a single root value."""

    __slots__ = ("_root",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, root: Optional[Value] = None) -> None:
        self._root = Value.null() if root is None else root

    def as_value(self) -> Value:
        """Return the root value; edits to it change the document."""
        return self._root

    def as_array(self) -> Optional[Array]:
        """Return an array view of the root, or None if it is not an array."""
        return as_array(self._root)

    def as_object(self) -> Optional[Object]:
        """Return an object view of the root, or None if it is not an object."""
        return as_object(self._root)

    def get_type(self) -> JsonType:
        return self._root.get_type()

    def as_number(self) -> Optional[Number]:
        return self._root.as_number()

    def as_bool(self) -> Optional[bool]:
        return self._root.as_bool()

    def as_str(self) -> Optional[str]:
        return self._root.as_str()

    def get(self, index: Index) -> Optional[Value]:
        return self._root.get(index)

    def pointer(self, path: Iterable[Index]) -> Optional[Value]:
        return self._root.pointer(path)

    def to_string(self) -> str:
        """Serialize the document to compact JSON."""
        return to_string(self._root)

    def __getitem__(self, index: Index) -> Value:
        return self._root[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self._root == other._root
        if isinstance(other, Value):
            return self._root == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Document({self.to_string()})"


def dom_from_str(json_text: str) -> Document:
    """Parse JSON text into a document; raise ValueError if it is invalid."""
    builder = DocumentBuilder()
    _Parser(json_text, builder).run()
    return Document(builder.finish())


def dom_from_slice(data: Any) -> Document:
    """Parse UTF-8 encoded JSON bytes into a document."""
    return dom_from_str(bytes(data).decode("utf-8"))