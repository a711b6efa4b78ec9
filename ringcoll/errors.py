# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

class RingCollError(Exception):
    pass

class ConfigurationError(RingCollError, ValueError):
    '''Invalid rank count, chunk size, input vectors or wiring. Raised before any participant starts.'''
    pass

class ConsistencyError(RingCollError, RuntimeError):
    '''A participant received a message tagged with a chunk index other than the one the protocol expects.'''

    def __init__(self, rank, phase, step, expected, received, field='chunk'):
        self.rank = rank
        self.phase = phase
        self.step = step
        self.expected = expected
        self.received = received
        self.field = field
        super().__init__(f'rank {rank} ({phase}, step {step}): expected {field} {expected} but received {received}')

class RunCancelled(RingCollError):
    pass

class RunTimeout(RunCancelled):
    def __init__(self, timeout):
        self.timeout = timeout
        super().__init__(f'run did not complete within {timeout} seconds')

class RunAborted(RingCollError):
    # Raised inside participants that are unwound because the run was aborted elsewhere.
    pass
