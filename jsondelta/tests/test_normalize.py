# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
import decimal
import enum
from collections import namedtuple, OrderedDict
from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from jsondelta.errors import NormalizationError
from jsondelta.normalize import normalize


class Color(enum.Enum):
    RED = "red"
    BLUE = 2


Point = namedtuple("Point", ["x", "y"])


@dataclass
class Entity:
    ID: int
    Name: str
    Relation: Optional["Entity"] = None
    Tags: List[str] = field(default_factory=list)


def test_json_values_pass_through():
    value = {"a": [1, 2.5, "x", None, True, {"b": False}]}
    assert normalize(value) == value


def test_special_scalars():
    assert normalize(decimal.Decimal("3")) == 3
    assert isinstance(normalize(decimal.Decimal("3")), int)
    assert normalize(decimal.Decimal("1.5")) == 1.5
    assert normalize(Color.RED) == "red"
    assert normalize(Color.BLUE) == 2
    assert normalize(datetime.date(2020, 1, 2)) == "2020-01-02"
    assert normalize(datetime.datetime(2020, 1, 2, 3, 4, 5)) == "2020-01-02T03:04:05"
    assert normalize(b"\x00\x01") == "AAE="
    assert normalize(bytearray(b"hi")) == "aGk="


def test_containers():
    assert normalize((1, 2)) == [1, 2]
    assert normalize(Point(1, 2)) == {"x": 1, "y": 2}
    assert normalize(OrderedDict([("b", 1), ("a", (2,))])) == {"b": 1, "a": [2]}
    assert normalize({1: "one"}) == {"1": "one"}


def test_dataclass():
    e = Entity(1, "John", Relation=Entity(3, "Ken"), Tags=["a"])
    assert normalize(e) == {
        "ID": 1,
        "Name": "John",
        "Relation": {"ID": 3, "Name": "Ken", "Relation": None, "Tags": []},
        "Tags": ["a"],
    }


def test_shared_references_are_not_cycles():
    shared = {"x": 1}
    assert normalize({"a": shared, "b": [shared, shared]}) == {
        "a": {"x": 1}, "b": [{"x": 1}, {"x": 1}]}


def test_cycles_are_rejected():
    a = {}
    a["self"] = a
    with pytest.raises(NormalizationError):
        normalize(a)

    li = [1]
    li.append({"back": li})
    with pytest.raises(NormalizationError):
        normalize(li)

    e = Entity(1, "loop")
    e.Relation = e
    with pytest.raises(NormalizationError):
        normalize(e)


@pytest.mark.parametrize("value", [
    float("nan"),
    float("inf"),
    decimal.Decimal("NaN"),
    {1.5: "float key"},
    {(1, 2): "tuple key"},
    {True: "bool key"},
    {1, 2},
    object(),
    Entity,
])
def test_unsupported_values(value):
    with pytest.raises(NormalizationError):
        normalize(value)


def test_colliding_keys_are_rejected():
    with pytest.raises(NormalizationError):
        normalize({1: "a", "1": "b"})


class Shade(str, enum.Enum):
    RED = "red"


def test_str_mixin_enum_becomes_plain_value():
    value = normalize({"c": Shade.RED})["c"]
    assert type(value) is str
    assert value == "red"
    assert type(normalize([Shade.RED])[0]) is str
