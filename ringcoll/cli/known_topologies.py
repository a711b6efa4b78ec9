# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import ringcoll.topologies as topologies

class KnownTopologies:
    def __init__(self, parser):
        self.parser = parser
        self.constructors = {
            'Ring': topologies.ring,
            'ReversedRing': lambda n: topologies.reverse_topology(topologies.ring(n)),
            'Line': topologies.line,
        }
        self.parser.add_argument('--topology', type=str, default='Ring', choices=self.constructors.keys(), help='how the ranks are wired (default: Ring)')

    def create(self, args, num_nodes):
        return self.constructors[args.topology](num_nodes)
