#!/usr/bin/env python
# PYTHON_ARGCOMPLETE_OK

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.registry import default_algorithms
from ringcoll.cli import *

import argparse
import argcomplete

def main():
    parser = argparse.ArgumentParser('ringcoll')

    cmd_parsers = parser.add_subparsers(title='command', dest='command')
    cmd_parsers.required = True

    algorithms = default_algorithms()
    handlers = []
    handlers.append(make_handle_run(cmd_parsers, algorithms))
    handlers.append(make_algorithms(cmd_parsers, algorithms))

    argcomplete.autocomplete(parser)
    args = parser.parse_args()

    for handler in handlers:
        if handler(args, args.command):
            break

if __name__ == '__main__':
    main()
