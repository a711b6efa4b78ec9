# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Message:
    chunk_index: int
    payload: Tuple[float, ...]

    @staticmethod
    def of_chunk(data, chunk_index: int, chunk_size: int):
        # The payload is a copy, later writes to data never reach the receiver.
        start = chunk_index * chunk_size
        return Message(chunk_index, tuple(data[start:start + chunk_size]))

    def __repr__(self) -> str:
        return f'Message(chunk={self.chunk_index}, len={len(self.payload)})'
