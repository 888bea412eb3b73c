import pytest

from jsondom.types import JsonType, JsonValue


class PyValue(JsonValue):
    """Minimal view over plain Python data for exercising the interface."""

    def __init__(self, data):
        self.data = data

    def get_type(self):
        d = self.data
        if d is None:
            return JsonType.Null
        if isinstance(d, bool):
            return JsonType.Boolean
        if isinstance(d, (int, float)):
            return JsonType.Number
        if isinstance(d, str):
            return JsonType.String
        if isinstance(d, dict):
            return JsonType.Object
        return JsonType.Array

    def as_number(self):
        if self.get_type() == JsonType.Number:
            return self.data
        return None

    def as_str(self):
        return self.data if isinstance(self.data, str) else None

    def as_bool(self):
        return self.data if isinstance(self.data, bool) else None

    def get(self, index):
        d = self.data
        if isinstance(d, dict) and isinstance(index, str):
            return PyValue(d[index]) if index in d else None
        if isinstance(d, list) and isinstance(index, int):
            return PyValue(d[index]) if 0 <= index < len(d) else None
        return None

    def pointer(self, path):
        node = self
        for part in path:
            node = node.get(part)
            if node is None:
                return None
        return node


def test_json_type_codes_fixed():
    assert [t.value for t in JsonType] == [0, 1, 2, 3, 4, 5, 6]
    assert JsonType(4) is JsonType.Object
    assert JsonType(5) is JsonType.Array


def test_json_type_invalid_code():
    with pytest.raises(ValueError, match="invalid JsonType value"):
        JsonType(7)


def test_abstract_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        JsonValue()


@pytest.mark.parametrize(
    "data, kind",
    [
        (None, JsonType.Null),
        (True, JsonType.Boolean),
        (1.5, JsonType.Number),
        ("hello", JsonType.String),
        ({"a": 1}, JsonType.Object),
        ([1, 2], JsonType.Array),
    ],
)
def test_predicates_follow_type(data, kind):
    v = PyValue(data)
    checks = {
        JsonType.Null: JsonValue.is_null(v),
        JsonType.Boolean: JsonValue.is_boolean(v),
        JsonType.Number: JsonValue.is_number(v),
        JsonType.String: JsonValue.is_str(v),
        JsonType.Object: JsonValue.is_object(v),
        JsonType.Array: JsonValue.is_array(v),
    }
    assert [k for k, hit in checks.items() if hit] == [kind]


def test_is_true_and_is_false():
    assert JsonValue.is_true(PyValue(True)) is True
    assert JsonValue.is_false(PyValue(True)) is False
    assert JsonValue.is_false(PyValue(False)) is True
    assert JsonValue.is_true(PyValue("hello")) is False
    assert JsonValue.is_false(PyValue("hello")) is True


def test_signed_integer():
    v = PyValue(-1)
    assert JsonValue.as_i64(v) == -1
    assert JsonValue.is_i64(v) is True
    assert JsonValue.as_u64(v) is None
    assert JsonValue.as_f64(v) == -1.0


def test_unsigned_integer():
    v = PyValue(0)
    assert JsonValue.is_u64(v) is True
    assert JsonValue.as_u64(v) == 0
    assert JsonValue.is_number(v) is True


def test_integer_range_limits():
    big = 1 << 63
    assert JsonValue.as_i64(PyValue(big)) is None
    assert JsonValue.as_u64(PyValue(big)) == big
    assert JsonValue.as_i64(PyValue(big - 1)) == big - 1
    assert JsonValue.as_i64(PyValue(-(1 << 63))) == -(1 << 63)
    assert JsonValue.as_u64(PyValue(1 << 64)) is None


def test_float_only_as_f64():
    v = PyValue(1.1)
    assert JsonValue.as_f64(v) == 1.1
    assert JsonValue.is_f64(v) is True
    assert JsonValue.as_i64(v) is None
    assert JsonValue.as_u64(v) is None


def test_non_numbers_have_no_numeric_view():
    for data in ("hello", True, None, [1]):
        v = PyValue(data)
        assert (
            JsonValue.as_i64(v),
            JsonValue.as_u64(v),
            JsonValue.as_f64(v),
        ) == (None, None, None)
        assert JsonValue.is_f64(v) is False


def test_pointer_through_interface():
    v = PyValue({"object": {"a": "aaa"}, "array": [1, 2, 3]})
    assert JsonValue.is_str(v.pointer(["object", "a"])) is True
    assert JsonValue.as_u64(v.pointer(["array", 2])) == 3
    assert JsonValue.as_i64(v.pointer(["array", 0])) == 1
    assert v.pointer(["unknown"]) is None