# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.errors import RingCollError, ConfigurationError, ConsistencyError, RunCancelled, RunTimeout
from ringcoll.instance import RunConfig
from ringcoll.message import Message
from ringcoll.participant import Participant
from ringcoll.ring_allreduce import RingAllReduce
from ringcoll.registry import Algorithms, default_algorithms

def execute(num_ranks, chunk_size, **kwargs):
    return RingAllReduce().execute(num_ranks, chunk_size, **kwargs)
