# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .common import *
from ringcoll.instance import RunConfig
from ringcoll.ring_allreduce import RingAllReduce
from ringcoll.serialization import *

def test_save_and_load_result():
    config = RunConfig(3, 2, timeout=5.0)
    vectors = RingAllReduce().execute(config.num_ranks, config.chunk_size)
    result = RunResult('ring_allreduce', config, vectors)
    assert result.converged()
    with in_tempdir():
        save_ringcoll_object(result, 'result.json')
        loaded = load_ringcoll_object('result.json')
    assert loaded == result
    assert loaded.config == config

def test_not_converged():
    result = RunResult('ring_allreduce', RunConfig(2, 1), [(0, [1.0, 2.0]), (1, [1.0, 3.0])])
    assert not result.converged()

def test_plain_json_untouched():
    assert RingCollDecoder().decode('{"a": [1, 2]}') == {'a': [1, 2]}

def test_result_file_name():
    from ringcoll.cli.common import result_file_name
    result = RunResult('ring_allreduce', RunConfig(4, 16), [])
    assert result_file_name(result) == 'ring_allreduce.ranks4.chunk_size16.ringcoll.json'
