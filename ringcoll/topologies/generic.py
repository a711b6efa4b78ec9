# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .topology import Topology

def ring(num_nodes):
    links = []
    for i in range(num_nodes):
        row = [0] * num_nodes
        row[(i-1) % num_nodes] = 1
        links.append(row)
    return Topology(f'Ring(n={num_nodes})', links)

def line(num_nodes):
    links = []
    for i in range(num_nodes):
        row = [0] * num_nodes
        if i - 1 >= 0:
            row[i-1] = 1
        links.append(row)
    return Topology(f'Line(n={num_nodes})', links)
