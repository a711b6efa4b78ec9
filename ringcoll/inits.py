# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.errors import ConfigurationError

# Seeding schemes for the local vectors. Each takes (rank, num_ranks, chunk_size) and
# returns a fresh list of num_ranks * chunk_size floats.

def uniform(rank, num_ranks, chunk_size):
    return [float(rank + 1)] * (num_ranks * chunk_size)

def distinct_chunks(rank, num_ranks, chunk_size):
    data = []
    for j in range(num_ranks * chunk_size):
        c = j // chunk_size
        k = j % chunk_size
        data.append(float(1000 * c + 10 * k + rank))
    return data

def expected_uniform(num_ranks, chunk_size):
    total = float(num_ranks * (num_ranks + 1) // 2)
    return [total] * (num_ranks * chunk_size)

def expected_distinct_chunks(num_ranks, chunk_size):
    sum_ranks = num_ranks * (num_ranks - 1) / 2
    expected = []
    for j in range(num_ranks * chunk_size):
        base = 1000 * (j // chunk_size) + 10 * (j % chunk_size)
        expected.append(float(num_ranks * base + sum_ranks))
    return expected

known_inits = {
    'uniform': (uniform, expected_uniform),
    'distinct': (distinct_chunks, expected_distinct_chunks),
}

def init_vectors(init, num_ranks, chunk_size):
    if init is None:
        init = 'uniform'
    if isinstance(init, str):
        if not init in known_inits:
            raise ConfigurationError(f'unknown init scheme {init!r}, known: {", ".join(known_inits)}')
        init = known_inits[init][0]
    if callable(init):
        return [[float(x) for x in init(rank, num_ranks, chunk_size)] for rank in range(num_ranks)]
    return [[float(x) for x in vector] for vector in init]
