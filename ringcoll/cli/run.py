# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .common import *
from .known_inits import KnownInits
from .known_topologies import KnownTopologies
from ringcoll.errors import RingCollError
from ringcoll.instance import RunConfig
from ringcoll.serialization import RunResult
from tabulate import tabulate
import sys

preview_elements = 8

def _preview(vector):
    shown = ' '.join(f'{x:g}' for x in vector[:preview_elements])
    if len(vector) > preview_elements:
        shown += ' ...'
    return shown

def print_result(result):
    rows = [(rank, len(vector), _preview(vector)) for rank, vector in result.vectors]
    print(tabulate(rows, headers=['rank', 'elements', 'final data']))

def make_handle_run(cmd_parsers, algorithms):
    name = 'run'
    cmd = cmd_parsers.add_parser(name)
    cmd.add_argument('algorithm', type=str, nargs='?', default='ring_allreduce', choices=algorithms.names(), help='algorithm to run (default: ring_allreduce)')
    cmd.add_argument('-n', '--ranks', type=int, required=True, help='number of participants', metavar='N')
    cmd.add_argument('-c', '--chunk-size', type=str, default='1', help='elements per chunk, e.g. 16 or 4K', metavar='SIZE')
    cmd.add_argument('--queue-depth', type=int, default=2, help='capacity of each ring endpoint', metavar='N')
    cmd.add_argument('--timeout', type=float, default=None, help='cancel the run after this many seconds', metavar='SECONDS')
    cmd.add_argument('--check', action='store_true', help='compare every final vector against the closed form sum of the init scheme')
    cmd.add_argument('-q', '--quiet', action='store_true', help='do not print the final vectors')
    inits = KnownInits(cmd)
    topologies = KnownTopologies(cmd)
    validate_output_args, output_handler = add_output_result(cmd)

    def handle(args, command):
        if command != name:
            return False

        validate_output_args(args)
        try:
            chunk_size = parse_count(args.chunk_size)
        except ValueError as e:
            cmd.error(f'could not parse --chunk-size: {e}')
        config = RunConfig(args.ranks, chunk_size, args.queue_depth, args.timeout)
        algorithm = algorithms.get(args.algorithm)
        try:
            config.validate()
            topology = topologies.create(args, config.num_ranks)
            vectors = algorithm.execute(config.num_ranks, config.chunk_size, data=inits.name(args),
                topology=topology, timeout=config.timeout, queue_depth=config.queue_depth, logging=True)
        except RingCollError as e:
            print(f'error: {e}', file=sys.stderr)
            sys.exit(1)

        result = RunResult(args.algorithm, config, vectors)
        if not args.quiet:
            print_result(result)
        output_handler(args, result)

        if args.check:
            expected = inits.expected(args, config.num_ranks, config.chunk_size)
            wrong = [rank for rank, vector in vectors if vector != expected]
            if len(wrong) > 0:
                print(f'error: ranks {", ".join(map(str, wrong))} did not converge to the expected sum', file=sys.stderr)
                sys.exit(1)
            print(f'All {config.num_ranks} ranks hold the expected sum.')
        return True

    return handle
