# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.instance import RunConfig

from dataclasses import dataclass
from typing import List, Tuple
import json
import warnings

@dataclass
class RunResult:
    algorithm: str
    config: RunConfig
    vectors: List[Tuple[int, List[float]]]

    def converged(self):
        return all(vector == self.vectors[0][1] for _, vector in self.vectors)

def _ringcoll_object_hook(o):
    if not 'ringcoll_type' in o:
        return o
    if o['ringcoll_type'] == 'config':
        return RunConfig(o['num_ranks'], o['chunk_size'], o['queue_depth'], o['timeout'])
    if o['ringcoll_type'] == 'result':
        vectors = [(int(rank), [float(x) for x in vector]) for rank, vector in o['vectors']]
        return RunResult(o['algorithm'], o['config'], vectors)
    warnings.warn('Unhandled ringcoll_type in JSON')

def RingCollDecoder():
    return json.JSONDecoder(object_hook=_ringcoll_object_hook)

class RingCollEncoder(json.JSONEncoder):
    def __init__(self):
        super().__init__()

    def default(self, o):
        if isinstance(o, RunConfig):
            return {
                'ringcoll_type': 'config',
                'num_ranks': o.num_ranks,
                'chunk_size': o.chunk_size,
                'queue_depth': o.queue_depth,
                'timeout': o.timeout,
            }
        if isinstance(o, RunResult):
            return {
                'ringcoll_type': 'result',
                'algorithm': o.algorithm,
                'config': o.config,
                'vectors': [[rank, vector] for rank, vector in o.vectors],
            }
        return json.JSONEncoder.default(self, o)

def save_ringcoll_object(obj, filename):
    with open(filename, 'w') as f:
        f.write(RingCollEncoder().encode(obj))

def load_ringcoll_object(filename):
    with open(filename) as f:
        return RingCollDecoder().decode(f.read())
