# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.errors import RunAborted
from ringcoll.message import Message
from ringcoll.participant import Participant

import os
import tempfile
import shutil
import time

class in_tempdir:
    '''Context manager for changing to a temporary directory.'''
    def __init__(self):
        self.tempdir = tempfile.mkdtemp()

    def __enter__(self):
        self.cwd = os.getcwd()
        os.chdir(self.tempdir)

    def __exit__(self, etype, value, traceback):
        os.chdir(self.cwd)
        shutil.rmtree(self.tempdir)

def corrupting_participant(bad_rank, bad_send, offset=1):
    '''Participant class whose rank bad_rank mistags the chunk index of its bad_send-th message.'''
    class CorruptingParticipant(Participant):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.sends = 0

        def _send_chunk(self, chunk_index):
            if self.rank == bad_rank and self.sends == bad_send:
                payload = tuple(self.chunk(chunk_index))
                self.outbound.send(Message((chunk_index + offset) % self.num_ranks, payload))
            else:
                super()._send_chunk(chunk_index)
            self.sends += 1

    return CorruptingParticipant

def stalled_participant(stalled_rank):
    '''Participant class whose rank stalled_rank never sends anything until the run is aborted.'''
    class StalledParticipant(Participant):
        def run(self):
            if self.rank == stalled_rank:
                while not self.inbound.abort.is_set():
                    time.sleep(0.01)
                raise RunAborted(f'rank {self.rank} stalled')
            return super().run()

    return StalledParticipant

def recording_participant():
    '''Participant class that records the chunk tags it sends and receives per phase.'''
    class RecordingParticipant(Participant):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.sent = []
            self.received = []

        def _send_chunk(self, chunk_index):
            self.sent.append(chunk_index)
            super()._send_chunk(chunk_index)

        def _receive_chunk(self, phase, step, expected_index):
            payload = super()._receive_chunk(phase, step, expected_index)
            self.received.append((phase, step, expected_index))
            return payload

    return RecordingParticipant
