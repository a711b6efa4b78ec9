# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from dataclasses import dataclass

from ringcoll.errors import ConfigurationError

@dataclass(frozen=True)
class RunConfig:
    num_ranks: int
    chunk_size: int = 1
    queue_depth: int = 2
    timeout: float = None

    def vector_length(self):
        return self.num_ranks * self.chunk_size

    def steps_per_phase(self):
        return self.num_ranks - 1

    def validate(self):
        if not isinstance(self.num_ranks, int) or self.num_ranks < 1:
            raise ConfigurationError(f'num_ranks must be a positive integer, got {self.num_ranks!r}')
        if not isinstance(self.chunk_size, int) or self.chunk_size < 1:
            raise ConfigurationError(f'chunk_size must be a positive integer, got {self.chunk_size!r}')
        if self.queue_depth < 0:
            raise ConfigurationError(f'queue_depth must be non-negative, got {self.queue_depth}')
        if self.timeout != None and self.timeout <= 0:
            raise ConfigurationError(f'timeout must be strictly positive, got {self.timeout}')
        return self

    def set(self, num_ranks = None, chunk_size = None, queue_depth = None, timeout = None):
        return RunConfig(
            num_ranks if num_ranks != None else self.num_ranks,
            chunk_size if chunk_size != None else self.chunk_size,
            queue_depth if queue_depth != None else self.queue_depth,
            timeout if timeout != None else self.timeout)

    def __str__(self):
        s = f'ranks={self.num_ranks},chunk_size={self.chunk_size}'
        if self.queue_depth != 2:
            s += f',queue_depth={self.queue_depth}'
        if self.timeout != None:
            s += f',timeout={self.timeout}'
        return s
