# jsondom

A small JSON document model. JSON text is parsed into a `Document` made of
`Value` nodes. Each node keeps its JSON type, and numbers stay signed,
unsigned or floating point. You can reach nodes by index, by key or by a
pointer path, and you can edit arrays and objects in place.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Parsing

```python
from jsondom.document import dom_from_str, dom_from_slice

doc = dom_from_str('{"name": "John", "age": 30, "cars": ["Ford", "BMW"]}')
doc.get("age").as_i64()             # 30
doc.pointer(["cars", 1]).as_str()   # "BMW"
doc.pointer(["missing"])            # None
doc["name"].as_str()                # "John"

doc = dom_from_slice(b"[1, 2, 3]")
doc.to_string()                     # '[1,2,3]'
```

`dom_from_slice` decodes UTF-8 bytes and then parses them.

Invalid JSON raises `ValueError`. This covers trailing characters, a missing
`,` or `:`, an unterminated string and a number too large for a float.

Number types are assigned like this:

- Integers from 0 to 2**64 − 1 become unsigned.
- Negative integers down to −2**63 become signed.
- Every other number becomes a float.

## Values

A `Value` (in `jsondom.value`) is one node of the tree.

- **Constructors:** `Value.null()`, `Value.from_bool`, `Value.from_i64`,
  `Value.from_u64`, `Value.from_f64`, `Value.from_str`, `Value.new_array()`,
  `Value.new_object()`.
  - `from_i64` and `from_u64` raise `OverflowError` when the number is out of
    range.
  - `from_f64` returns `None` for NaN and infinity.
- **Type checks:** `is_null`, `is_boolean`, `is_true`, `is_false`, `is_number`,
  `is_str`, `is_array`, `is_object`, `is_i64`, `is_u64`, `is_f64`.
- **Accessors:** `as_bool`, `as_i64`, `as_u64`, `as_f64`, `as_number`,
  `as_str`. Each one returns `None` when the value has another type or does
  not fit.
- **Lookup:**
  - `get(key_or_index)` returns `None` when nothing is found.
  - `value[key_or_index]` raises `KeyError` or `IndexError` instead.
  - `pointer(path)` follows a sequence of keys and indices.
- **Type:** `get_type()` returns a member of `JsonType` (in `jsondom.types`).
- **Moving out:** `take()` moves the contents into a new value and leaves the
  original as null.
- **Conversion:** `to_python()` returns plain dicts, lists, str, int, float,
  bool and None.
- **Serialization:** `to_string(value)` returns compact JSON. It accepts a
  `Value` or a `Document`.

```python
from jsondom.value import Value, to_string

Value.from_bool(True).is_true()     # True
Value.from_i64(-1).as_u64()         # None
Value.from_u64(3).as_f64()          # 3.0
Value.from_f64(float("nan"))        # None
to_string(Value.from_str("hi"))     # '"hi"'
```

An object keeps its members in order, including duplicate keys:

- Lookups return the first matching member.
- `to_python()` keeps the last one.

## Editing containers

`jsondom.containers` has `Array` and `Object` views, which change the
underlying value directly. `as_array(value)` and `as_object(value)` return a
view, or `None` when the value is of another type. `Document.as_array()` and
`Document.as_object()` do the same for the root.

```python
from jsondom.containers import as_array
from jsondom.document import dom_from_str
from jsondom.value import Value

doc = dom_from_str('{"array": [1, 2, 3], "object": {}}')

arr = as_array(doc.get("array"))
arr.push(Value.from_str("pushed"))
arr.pop()
len(arr)                            # 3
arr[0] = Value.from_u64(10)

obj = doc.as_object()
obj.insert("inserted", Value.from_bool(True))   # returns the old value, or None
obj.contains_key("inserted")                    # True
obj.remove("inserted").is_true()                # True
obj.reserve(12)
obj.capacity()                                  # 12
```

`Object` provides:

- `get`, `insert`, `remove`, `pop` (which removes the last member), `reserve`
  and `capacity`.
- `items()`, which yields `(key, value)` pairs.
- Iteration over keys, and `len()`.

`Array` provides:

- `push`, `pop`, `reserve` and `capacity`.
- Indexing, including slices, and item assignment.
- Iteration and `len()`.

## Building from parse events

`jsondom.visitor.JsonVisitor` is the event interface.

- It has one `visit_*` callback per event.
- Each callback returns `True` to continue. The defaults return `False`.
- When a callback returns `False` during parsing, the parser raises
  `ValueError`.

`DocumentBuilder` (in `jsondom.document`) is a visitor that builds a value
tree from these events.

- `finish()` returns the root `Value`.
- `finish()` raises `ValueError` unless the events described exactly one
  complete value.

```python
from jsondom.document import Document, DocumentBuilder

builder = DocumentBuilder()
builder.visit_array_start(0)
builder.visit_u64(1)
builder.visit_str("two")
builder.visit_array_end(2)
doc = Document(builder.finish())
doc.to_string()                     # '[1,"two"]'
```

## Limits

- This is a library only. It has no command-line tool.
- Output is compact JSON only. There is no pretty-printing option.
- Parsing works on complete strings or bytes. It does not read incrementally
  from streams.
- `JsonType.Raw` exists, but no parsed or constructed value ever has that
  type.

## Running the tests

```
pytest
```