# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.channel import Endpoint, poll_interval
from ringcoll.errors import ConfigurationError, RunAborted, RunCancelled, RunTimeout
from ringcoll.inits import init_vectors
from ringcoll.instance import RunConfig
from ringcoll.participant import Participant
from ringcoll.topologies import check_ring, ring

from concurrent.futures import ThreadPoolExecutor, wait, FIRST_EXCEPTION
import threading
import time
import humanfriendly

class RingAllReduce:
    '''Elementwise sum over num_ranks vectors using only nearest neighbor sends on a directed ring.

    Every participant runs in its own thread and talks to its neighbors through bounded
    endpoints. ``execute`` returns only once all of them have finished both phases, and
    returns nothing at all if any of them failed or the run was cancelled.
    '''

    name = 'ring_allreduce'

    def __init__(self, participant_cls=Participant):
        self.participant_cls = participant_cls

    def build(self, config: RunConfig, vectors, topology=None, abort=None):
        config.validate()
        P = config.num_ranks
        if len(vectors) != P:
            raise ConfigurationError(f'expected {P} input vectors, got {len(vectors)}')
        for rank, vector in enumerate(vectors):
            if len(vector) != config.vector_length():
                raise ConfigurationError(f'vector of rank {rank} has {len(vector)} elements, expected {P} * {config.chunk_size} = {config.vector_length()}')

        if topology == None:
            topology = ring(P)
        if topology.num_nodes() != P:
            raise ConfigurationError(f'topology {topology.name} has {topology.num_nodes()} nodes, but the run has {P} ranks')
        successors = check_ring(topology)

        if abort == None:
            abort = threading.Event()
        endpoints = [Endpoint(rank, config.queue_depth, abort) for rank in range(P)]
        return [self.participant_cls(rank, P, config.chunk_size, vectors[rank],
                    inbound=endpoints[rank], outbound=endpoints[successors[rank]])
                for rank in range(P)]

    def run(self, config: RunConfig, data='uniform', topology=None, cancel=None, logging=False):
        config.validate()
        vectors = init_vectors(data, config.num_ranks, config.chunk_size)
        abort = threading.Event()
        participants = self.build(config, vectors, topology, abort)

        if logging:
            print(f'Running {self.name} with {config}... ', end='', flush=True)
        start_time = time.time()
        try:
            self._join(participants, abort, cancel, config.timeout)
        except Exception:
            if logging:
                print(f'failed. ({humanfriendly.format_timespan(time.time() - start_time)})')
            raise
        if logging:
            print(f'converged! ({humanfriendly.format_timespan(time.time() - start_time)})')
        return participants

    def execute(self, num_ranks, chunk_size, data='uniform', topology=None, cancel=None, timeout=None, queue_depth=2, logging=False):
        config = RunConfig(num_ranks, chunk_size, queue_depth, timeout)
        participants = self.run(config, data, topology, cancel, logging)
        return [participant.result() for participant in participants]

    def _join(self, participants, abort, cancel, timeout):
        if cancel != None and cancel.is_set():
            raise RunCancelled('run was cancelled before it started')
        deadline = time.monotonic() + timeout if timeout != None else None
        stop_reason = None
        with ThreadPoolExecutor(max_workers=len(participants), thread_name_prefix='ringcoll-rank') as executor:
            futures = {executor.submit(participant.run): participant.rank for participant in participants}
            pending = set(futures)
            try:
                while pending:
                    done, pending = wait(pending, timeout=poll_interval, return_when=FIRST_EXCEPTION)
                    if any(future.exception() != None for future in done):
                        break
                    if not pending:
                        break
                    if cancel != None and cancel.is_set():
                        stop_reason = RunCancelled('run was cancelled')
                        break
                    if deadline != None and time.monotonic() >= deadline:
                        stop_reason = RunTimeout(timeout)
                        break
            finally:
                if pending:
                    abort.set()
        # Leaving the executor joins every participant thread.

        failures = []
        for future, rank in futures.items():
            error = future.exception()
            if error != None and not isinstance(error, RunAborted):
                failures.append((rank, error))
        if failures:
            failures.sort(key=lambda failure: failure[0])
            raise failures[0][1]
        if stop_reason != None:
            raise stop_reason
