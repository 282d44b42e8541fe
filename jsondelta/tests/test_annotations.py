# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Tuple

from jsondelta.annotations import (
    ignored_field, ignored_paths, is_ignored_field, base_type,
)


@dataclass
class Credentials:
    user: str
    password: str = ignored_field(default="")


@dataclass
class Account:
    id: int
    token: str = ignored_field(default="", metadata={"doc": "api token"})
    login: Optional[Credentials] = None
    history: List[Credentials] = field(default_factory=list)
    pair: Tuple[Credentials, ...] = ()
    by_name: Dict[str, Credentials] = field(default_factory=dict)


@dataclass
class Node:
    name: str
    secret: str = ignored_field(default="")
    parent: Optional["Node"] = None


def test_ignored_field_metadata():
    token, = [f for f in fields(Account) if f.name == "token"]
    assert is_ignored_field(token)
    assert token.metadata["doc"] == "api token"
    id_field, = [f for f in fields(Account) if f.name == "id"]
    assert not is_ignored_field(id_field)


def test_base_type():
    assert base_type(int) is int
    assert base_type(Optional[Credentials]) is Credentials
    assert base_type(List[Optional[Credentials]]) is Credentials
    assert base_type(Tuple[Credentials, ...]) is Credentials
    assert base_type(Dict[str, Credentials]) is None
    assert base_type(Optional[Tuple[int, str]]) is None


def test_ignored_paths_of_nested_dataclasses():
    paths = ignored_paths(Account)
    assert sorted(paths) == [
        ("history", "password"),
        ("login", "password"),
        ("pair", "password"),
        ("token",),
    ]


def test_ignored_paths_of_non_dataclasses():
    assert ignored_paths(dict) == []
    assert ignored_paths(int) == []
    assert ignored_paths(Credentials("a")) == []


def test_self_referencing_types_stop_at_max_depth():
    paths = ignored_paths(Node, max_depth=3)
    assert paths == [
        ("secret",),
        ("parent", "secret"),
        ("parent", "parent", "secret"),
    ]
    assert len(ignored_paths(Node)) == 10
    assert ignored_paths(Node, max_depth=0) == []
