# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import queue
import threading

from ringcoll.errors import RunAborted

# How often a blocked send or receive wakes up to look at the abort flag.
poll_interval: float = 0.05

class Endpoint:
    '''Receive side of one ring edge: a bounded mailbox fed by exactly one neighbor.

    Both send and receive block like a rendezvous, but give up with RunAborted as soon
    as the shared abort event of the run is set.
    '''

    def __init__(self, rank: int, depth: int = 2, abort: threading.Event = None):
        self.rank = rank
        # queue.Queue treats maxsize=0 as unbounded, a fully synchronous channel is modeled as depth 1
        self.depth = max(depth, 1)
        self.abort = abort if abort != None else threading.Event()
        self._queue = queue.Queue(maxsize=self.depth)

    def send(self, message):
        while True:
            if self.abort.is_set():
                raise RunAborted(f'send to rank {self.rank} aborted')
            try:
                self._queue.put(message, timeout=poll_interval)
                return
            except queue.Full:
                continue

    def receive(self):
        while True:
            if self.abort.is_set():
                raise RunAborted(f'receive on rank {self.rank} aborted')
            try:
                return self._queue.get(timeout=poll_interval)
            except queue.Empty:
                continue

    def pending(self):
        return self._queue.qsize()

    def __repr__(self) -> str:
        return f'Endpoint(rank={self.rank}, depth={self.depth})'
