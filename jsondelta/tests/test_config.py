# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os

import pytest
from traitlets import TraitError

from jsondelta.config import (
    build_config, recursive_update, config_path, Diff, entrypoint_configurables,
)


def test_default_config(isolated_config):
    config = build_config('jsondelta')
    assert config == {
        'log_level': 'INFO',
        'format': 'new',
        'ignore': [],
        'color': True,
    }
    config = build_config('jsondelta', include_none=True)
    assert config['indent'] is None


def test_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('not-an-entrypoint')


def test_config_from_working_directory(isolated_config):
    with open(os.path.join(str(isolated_config), 'jsondelta_config.json'), 'w') as f:
        json.dump({
            'JsonDelta': {'format': 'both', 'indent': 2},
            'Diff': {'ignore': ['/meta/updated']},
        }, f)
    config = build_config('jsondelta')
    assert config['format'] == 'both'
    assert config['indent'] == 2
    assert config['ignore'] == ['/meta/updated']


def test_working_directory_overrides_user_config(isolated_config):
    user_dir = config_path()[1]
    os.makedirs(user_dir)
    with open(os.path.join(user_dir, 'jsondelta_config.json'), 'w') as f:
        json.dump({'JsonDelta': {'format': 'old', 'color': False}}, f)
    with open(os.path.join(str(isolated_config), 'jsondelta_config.json'), 'w') as f:
        json.dump({'JsonDelta': {'format': 'both'}}, f)
    config = build_config('jsondelta')
    assert config['format'] == 'both'
    assert config['color'] is False


def test_recursive_update():
    target = {'a': {'b': 1, 'c': 2}, 'd': 3}
    recursive_update(target, {'a': {'b': None}, 'd': None, 'e': 5}, False)
    assert target == {'a': {'c': 2}, 'e': 5}

    target = {'a': 1}
    recursive_update(target, {'a': None}, True)
    assert target == {'a': None}


def test_ignore_trait_validation():
    d = Diff()
    d.ignore = ['/a/b', 'c.d']
    assert d.ignore == ['/a/b', 'c.d']
    with pytest.raises(TraitError):
        d.ignore = ['/']
    with pytest.raises(TraitError):
        d.ignore = [1]


def test_format_trait_validation():
    d = Diff()
    d.format = 'both'
    with pytest.raises(TraitError):
        d.format = 'neither'


def test_entrypoints():
    assert 'jsondelta' in entrypoint_configurables
