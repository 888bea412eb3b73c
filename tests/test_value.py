import json
import math

import pytest

from jsondom.types import JsonType
from jsondom.value import Value, to_string

TEST_DATA = {
    "bool": True,
    "int": -1,
    "uint": 0,
    "float": 1.1,
    "string": "hello",
    "array": [1, 2, 3],
    "object": {"a": "aaa"},
    "strempty": "",
    "objempty": {},
    "arrempty": [],
}


@pytest.fixture
def value():
    return Value._from_python(TEST_DATA)


def test_value_is(value):
    assert value.get("bool").is_true()
    assert value.get("bool").is_boolean()
    assert value.get("uint").is_u64()
    assert value.get("uint").is_number()
    assert value.get("int").is_i64()
    assert value.get("float").is_f64()
    assert value.get("string").is_str()
    assert value.get("array").is_array()
    assert value.get("object").is_object()
    assert value.get("strempty").is_str()
    assert value.get("objempty").is_object()
    assert value.get("arrempty").is_array()


def test_value_get(value):
    assert value.get("int").as_i64() == -1
    assert value["array"].get(0).as_i64() == 1
    assert value.pointer(["array", 2]).as_i64() == 3
    assert value.pointer(["array", 2]).as_u64() == 3
    assert value.pointer(["object", "a"]).as_str() == "aaa"
    assert value.pointer(["objempty", "a"]) is None
    assert value.pointer(["arrempty", 1]) is None
    assert value.pointer(["unknown"]) is None


@pytest.mark.parametrize(
    "data",
    [
        {"name": "John", "age": 30},
        [1, 2, 3],
        {
            "name": "John",
            "age": 30,
            "cars": [
                {"name": "Ford", "models": ["Fiesta", "Focus", "Mustang"]},
                {"name": "BMW", "models": ["320", "X3", "X5"]},
                {"name": "Fiat", "models": ["500", "Panda"]},
            ],
            "address": {
                "street": "Main Street",
                "city": "New York",
                "state": "NY",
                "zip": "10001",
            },
        },
        {"name": "John", "age": 30, "description": 'He said, "I\'m coming home."'},
    ],
)
def test_to_string_round_trip(data):
    assert json.loads(to_string(Value._from_python(data))) == data


def test_to_string_compact():
    node = Value._from_python({"name": "John", "age": 30, "ok": [True, None, 1.5]})
    assert to_string(node) == '{"name":"John","age":30,"ok":[true,null,1.5]}'


def test_to_string_escapes():
    assert to_string(Value.from_str('a "b"\n')) == '"a \\"b\\"\\n"'


def test_to_python(value):
    assert value.to_python() == TEST_DATA


def test_numeric_conversions():
    assert Value.from_u64(2**63).as_i64() is None
    assert Value.from_u64(2**63).as_u64() == 2**63
    assert Value.from_i64(-5).as_u64() is None
    assert Value.from_i64(-5).as_f64() == -5.0
    assert Value.from_f64(2.5).as_i64() is None
    assert Value.from_f64(2.5).as_number() == 2.5
    assert Value.from_str("x").as_number() is None


def test_from_f64_rejects_non_finite():
    assert Value.from_f64(math.nan) is None
    assert Value.from_f64(math.inf) is None


def test_integer_range_errors():
    with pytest.raises(OverflowError):
        Value.from_i64(2**63)
    with pytest.raises(OverflowError):
        Value.from_u64(-1)


def test_take_leaves_null(value):
    node = value["array"]
    moved = node.take()
    assert node.is_null()
    assert moved.to_python() == [1, 2, 3]
    assert value.to_python()["array"] is None


def test_getitem_missing(value):
    assert value.get("missing") is None
    assert value["array"].get(3) is None
    assert value["array"][2].as_u64() == 3
    with pytest.raises(KeyError):
        value["missing"]
    with pytest.raises(IndexError):
        value["array"][3]


def test_get_wrong_container(value):
    assert value.get(0) is None
    assert value["array"].get("a") is None
    with pytest.raises(TypeError):
        value.get(1.5)


def test_equality():
    assert Value.from_i64(3) == Value.from_u64(3)
    assert Value.from_u64(1) != Value.from_f64(1.0)
    assert Value.from_bool(True) != Value.from_u64(1)
    assert Value._from_python({"a": 1, "b": [2]}) == Value._from_python({"b": [2], "a": 1})
    assert Value._from_python([1, 2]) != Value._from_python([2, 1])


def test_types_of_constructors():
    assert Value.null().get_type() == JsonType.Null
    assert Value.new_object().get_type() == JsonType.Object
    assert Value.new_array().get_type() == JsonType.Array
    assert to_string(Value.new_object()) == "{}"
    assert to_string(Value.new_array()) == "[]"


def test_from_python_rejects_nan():
    with pytest.raises(ValueError):
        Value._from_python([math.nan])