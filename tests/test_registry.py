# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import pytest
from ringcoll.registry import Algorithms, default_algorithms
from ringcoll.ring_allreduce import RingAllReduce

class Constant:
    def execute(self, num_ranks, chunk_size, **kwargs):
        return [(rank, [0.0] * (num_ranks * chunk_size)) for rank in range(num_ranks)]

def test_default_algorithms():
    algorithms = default_algorithms()
    assert algorithms.names() == ['ring_allreduce']
    assert isinstance(algorithms['ring_allreduce'], RingAllReduce)
    result = algorithms.execute('ring_allreduce', 4, 1)
    assert all(vector == [10.0] * 4 for _, vector in result)

def test_instances_are_independent():
    assert default_algorithms().get('ring_allreduce') is not default_algorithms().get('ring_allreduce')

def test_register():
    algorithms = Algorithms(ring_allreduce=RingAllReduce())
    algorithms.register('constant', Constant())
    assert 'constant' in algorithms
    assert len(algorithms) == 2
    assert algorithms.names() == ['constant', 'ring_allreduce']
    assert algorithms.execute('constant', 2, 1) == [(0, [0.0, 0.0]), (1, [0.0, 0.0])]

def test_register_errors():
    algorithms = default_algorithms()
    with pytest.raises(ValueError):
        algorithms.register('ring_allreduce', RingAllReduce())
    with pytest.raises(TypeError):
        algorithms.register('nothing', object())
    with pytest.raises(KeyError):
        algorithms.get('tree_allreduce')
