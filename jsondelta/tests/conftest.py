# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os

from pytest import fixture, skip


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def write_json(tmpdir):
    """Fixture returning a function that writes json to a temporary file"""
    def write(name, content):
        fn = os.path.join(str(tmpdir), name)
        with open(fn, 'w', encoding='utf-8') as f:
            json.dump(content, f)
        return fn
    return write


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run with an empty working directory and home, so no config files apply"""
    home = tmpdir.mkdir('home')
    work = tmpdir.mkdir('work')
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('USERPROFILE', str(home))
    monkeypatch.chdir(str(work))
    return work
