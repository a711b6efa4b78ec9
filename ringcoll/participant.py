# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from typing import List

from ringcoll.channel import Endpoint
from ringcoll.errors import ConsistencyError
from ringcoll.message import Message

REDUCE_SCATTER = 'reduce-scatter'
ALLGATHER = 'allgather'

class Participant:
    '''One rank of the ring all-reduce.

    The local vector holds num_ranks chunks of chunk_size elements each. The participant
    receives from its left neighbor on ``inbound`` and sends to its right neighbor by
    putting into that neighbor's endpoint, ``outbound``.

    Both phases take exactly num_ranks - 1 steps and every step is a send followed by a
    blocking receive. After reduce-scatter the designated chunk (rank + 1) mod num_ranks
    holds the full sum, after allgather every chunk does.
    '''

    def __init__(self, rank: int, num_ranks: int, chunk_size: int, data: List[float],
        inbound: Endpoint, outbound: Endpoint):
        self.rank = rank
        self.num_ranks = num_ranks
        self.chunk_size = chunk_size
        self.data = data
        self.inbound = inbound
        self.outbound = outbound

    def left(self):
        return (self.rank - 1) % self.num_ranks

    def right(self):
        return (self.rank + 1) % self.num_ranks

    def designated_chunk(self):
        return (self.rank + 1) % self.num_ranks

    def chunk(self, chunk_index: int):
        start = chunk_index * self.chunk_size
        return self.data[start:start + self.chunk_size]

    def _send_chunk(self, chunk_index):
        self.outbound.send(Message.of_chunk(self.data, chunk_index, self.chunk_size))

    def _receive_chunk(self, phase, step, expected_index):
        received = self.inbound.receive()
        if received.chunk_index != expected_index:
            raise ConsistencyError(self.rank, phase, step, expected_index, received.chunk_index)
        if len(received.payload) != self.chunk_size:
            raise ConsistencyError(self.rank, phase, step, self.chunk_size, len(received.payload), field='payload length')
        return received.payload

    def reduce_scatter(self):
        P = self.num_ranks
        for s in range(P - 1):
            send_idx = (self.rank - s + P) % P
            recv_idx = (self.rank - s - 1 + P) % P
            self._send_chunk(send_idx)
            payload = self._receive_chunk(REDUCE_SCATTER, s, recv_idx)
            start = recv_idx * self.chunk_size
            for k in range(self.chunk_size):
                self.data[start + k] += payload[k]

    def allgather(self):
        P = self.num_ranks
        for s in range(P - 1):
            # forward what the left neighbor just delivered, starting with the designated chunk
            send_idx = (self.rank + 1 - s + P) % P
            recv_idx = (self.rank - s + P) % P
            self._send_chunk(send_idx)
            payload = self._receive_chunk(ALLGATHER, s, recv_idx)
            start = recv_idx * self.chunk_size
            self.data[start:start + self.chunk_size] = payload

    def run(self):
        self.reduce_scatter()
        self.allgather()
        return self

    def result(self):
        return (self.rank, list(self.data))

    def __repr__(self) -> str:
        return f'Participant(rank={self.rank}/{self.num_ranks}, chunk_size={self.chunk_size})'
