# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import pytest

from jsondelta.formatters import (
    new_only, old_only, both_as_pair, default_format, get_formatter,
)


def test_builtin_formatters():
    assert new_only(1, 2) == 2
    assert old_only(1, 2) == 1
    assert both_as_pair(1, 2) == {"Old": 1, "New": 2}
    assert both_as_pair(None, [1]) == {"Old": None, "New": [1]}
    assert default_format is new_only


def test_formatters_do_not_copy_or_modify():
    old = {"a": 1}
    new = [1, 2]
    assert new_only(old, new) is new
    assert old_only(old, new) is old
    pair = both_as_pair(old, new)
    assert pair["Old"] is old and pair["New"] is new
    assert old == {"a": 1} and new == [1, 2]


def test_get_formatter_by_name():
    assert get_formatter("new") is new_only
    assert get_formatter("old") is old_only
    assert get_formatter("both") is both_as_pair
    with pytest.raises(ValueError):
        get_formatter("neither")
