# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.inits import known_inits

class KnownInits:
    def __init__(self, parser):
        self.parser = parser
        self.parser.add_argument('--init', type=str, default='uniform', choices=known_inits.keys(), help='how each rank seeds its vector (default: uniform)')

    def name(self, args):
        return args.init

    def expected(self, args, num_ranks, chunk_size):
        _, expected = known_inits[args.init]
        return expected(num_ranks, chunk_size)
