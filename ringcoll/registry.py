# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.ring_allreduce import RingAllReduce

class Algorithms:
    '''Named collection of constructed collective algorithms.

    Entries only need an ``execute(num_ranks, chunk_size, ...)`` method. The collection
    is built explicitly by its owner, there is no module level registry to mutate.
    '''

    def __init__(self, **algorithms):
        self._algorithms = {}
        for name, algorithm in algorithms.items():
            self.register(name, algorithm)

    def register(self, name, algorithm):
        if name in self._algorithms:
            raise ValueError(f'algorithm {name!r} is already registered')
        if not callable(getattr(algorithm, 'execute', None)):
            raise TypeError(f'algorithm {name!r} has no execute method')
        self._algorithms[name] = algorithm
        return algorithm

    def get(self, name):
        if not name in self._algorithms:
            raise KeyError(f'no algorithm named {name!r}, known: {", ".join(self.names())}')
        return self._algorithms[name]

    def names(self):
        return sorted(self._algorithms)

    def execute(self, name, num_ranks, chunk_size, **kwargs):
        return self.get(name).execute(num_ranks, chunk_size, **kwargs)

    def __contains__(self, name):
        return name in self._algorithms

    def __getitem__(self, name):
        return self.get(name)

    def __len__(self):
        return len(self._algorithms)

def default_algorithms():
    ring_allreduce = RingAllReduce()
    return Algorithms(**{ring_allreduce.name: ring_allreduce})
