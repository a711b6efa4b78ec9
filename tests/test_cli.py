# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .common import *
from ringcoll.serialization import load_ringcoll_object

import os
import sys

def test_run_as_module():
    assert 0 == os.system(f'{sys.executable} -m ringcoll --help')

def test_entrypoint():
    assert 0 == os.system('ringcoll --help')

def test_run():
    out = os.popen('ringcoll run -n 4 -c 1').read()
    assert 'converged!' in out
    assert '10 10 10 10' in out

def test_run_check():
    assert 0 == os.system('ringcoll run ring_allreduce -n 5 -c 3 --check --quiet')
    assert 0 == os.system('ringcoll run -n 3 -c 2 --init distinct --check')
    assert 0 == os.system('ringcoll run -n 1 -c 4 --check')

def test_run_human_chunk_size():
    assert 0 == os.system('ringcoll run -n 2 -c 1K --check --quiet')

def test_run_errors():
    assert 0 != os.system('ringcoll run -n 0')
    assert 0 != os.system('ringcoll run -n 3 -c 0')
    assert 0 != os.system('ringcoll run -n 3 -c lots')
    assert 0 != os.system('ringcoll run -n 3 --topology Line')
    assert 0 != os.system('ringcoll run -n 4 --topology ReversedRing')
    assert 0 != os.system('ringcoll run tree_allreduce -n 4')

def test_run_output():
    with in_tempdir():
        assert 0 == os.system('ringcoll run -n 3 -c 2 -o result.json')
        assert os.path.exists('result.json')
        result = load_ringcoll_object('result.json')
        assert result.algorithm == 'ring_allreduce'
        assert result.config.num_ranks == 3
        assert result.converged()
        assert result.vectors[0][1] == [6.0] * 6
        assert 0 == os.system('ringcoll run -n 3 -c 2 -d .')
        assert os.path.exists('ring_allreduce.ranks3.chunk_size2.ringcoll.json')
        assert 0 == os.system('ringcoll run -n 3 -c 2 -d . --force')

def test_algorithms_list():
    out = os.popen('ringcoll algorithms list').read()
    assert 'ring_allreduce' in out
    assert 'RingAllReduce' in out

def test_run_no_save():
    with in_tempdir():
        assert 0 == os.system('ringcoll run -n 2 -c 1 -d . --no-save')
        assert 0 == os.system('ringcoll run -n 2 -c 1 -o result.json --no-save')
        assert len(os.listdir('.')) == 0

def test_run_output_errors():
    with in_tempdir():
        assert 0 != os.system('ringcoll run -n 2 -d missing')
        os.mkdir('out')
        assert 0 != os.system('ringcoll run -n 2 -o out')
        assert 0 == os.system('ringcoll run -n 2 -o result.json')
        first = os.path.getmtime('result.json')
        assert 0 == os.system('ringcoll run -n 3 -o result.json')
        assert load_ringcoll_object('result.json').config.num_ranks == 2
        assert os.path.getmtime('result.json') == first
