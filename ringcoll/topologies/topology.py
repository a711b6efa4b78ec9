# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from typing import List

from ringcoll.errors import ConfigurationError

class Topology(object):
    # links[dst][src] is the number of directed links from src to dst
    def __init__(self, name: str, links: List[List[int]]):
        self.name = name
        self.links = links
        for dst, row in enumerate(links):
            if len(row) != len(links):
                raise ValueError(f'Topology {name} is not square: row {dst} has {len(row)} entries for {len(links)} nodes.')
            for src, count in enumerate(row):
                if count < 0:
                    raise ValueError(f'Link {src}→{dst} in {name} has a negative count of {count}.')

    def sources(self, dst: int):
        for src, count in enumerate(self.links[dst]):
            if count > 0:
                yield src

    def destinations(self, src: int):
        for dst, links in enumerate(self.links):
            count = links[src]
            if count > 0:
                yield dst

    def link(self, src: int, dst: int):
        return self.links[dst][src]

    def num_nodes(self):
        return len(self.links)

    def nodes(self):
        return range(self.num_nodes())

    def successor(self, src: int):
        dsts = list(self.destinations(src))
        if len(dsts) != 1:
            raise ConfigurationError(f'node {src} of {self.name} has {len(dsts)} outbound links, a ring needs exactly 1')
        return dsts[0]

    def __repr__(self) -> str:
        return f'Topology({self.name})'

def check_ring(topology: Topology):
    '''
    Checks that following outbound links from node 0 visits every node exactly once and
    returns to node 0, with each node having exactly one inbound and one outbound link.
    Returns the successor of every node.
    '''
    n = topology.num_nodes()
    if n == 0:
        raise ConfigurationError(f'{topology.name} has no nodes')
    if n == 1 and len(list(topology.destinations(0))) == 0:
        return [0]
    successors = [topology.successor(node) for node in topology.nodes()]
    for node in topology.nodes():
        srcs = list(topology.sources(node))
        if len(srcs) != 1:
            raise ConfigurationError(f'node {node} of {topology.name} has {len(srcs)} inbound links, a ring needs exactly 1')
    visited = [0]
    node = successors[0]
    while node != 0:
        if node in visited:
            raise ConfigurationError(f'{topology.name} is not a single cycle: node {node} is revisited before returning to 0')
        visited.append(node)
        node = successors[node]
    if len(visited) != n:
        raise ConfigurationError(f'{topology.name} is not a single cycle: the cycle through 0 has {len(visited)} of {n} nodes')
    return successors
