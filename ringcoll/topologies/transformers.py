# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .topology import Topology

def reverse_topology(topology):
    '''
    Reverses the direction of all links in the topology.
    '''
    num_nodes = topology.num_nodes()
    links = [[topology.links[src][dst] for src in range(num_nodes)] for dst in range(num_nodes)]
    return Topology(f'Reverse{topology.name}', links)
