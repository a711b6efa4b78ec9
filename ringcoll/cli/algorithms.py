# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .common import *
from tabulate import tabulate

def make_algorithms(cmd_parsers, algorithms):
    def make_handle_list(category_parsers):
        cmd = category_parsers.add_parser('list')

        def handle(args, command):
            if command != 'list':
                return False

            rows = [(name, type(algorithms.get(name)).__name__) for name in algorithms.names()]
            print(tabulate(rows, headers=['name', 'implementation']))
            return True

        return handle

    return make_cmd_category(cmd_parsers, 'algorithms', 'subcommand', [make_handle_list])
