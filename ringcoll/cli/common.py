# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ringcoll.serialization import *
from pathlib import Path
import sys
import re
import humanfriendly

def result_file_name(result):
    config = result.config
    return f'{result.algorithm}.ranks{config.num_ranks}.chunk_size{config.chunk_size}.ringcoll.json'

def _fail(message):
    print(f'error: {message}', file=sys.stderr)
    sys.exit(1)

def _write_result(path, force, result):
    if path.is_dir():
        _fail(f'{path} is a directory, did you mean to use -d?')
    if path.exists() and not force:
        print(f'file already exists, use -f/--force to overwrite {path}', file=sys.stderr)
        return False
    if path.exists():
        print(f'Overwriting {path}')
    save_ringcoll_object(result, path)
    print(f'Wrote {result.algorithm} result for {result.config.num_ranks} ranks to {path}')
    return True

def add_output_result(parser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-o', '--output', type=Path, help='file to write the run result to', metavar='FILE')
    group.add_argument('-d', '--directory', type=Path, default=None, help='directory to write the run result to, named after the algorithm and sizes', metavar='DIR')
    parser.add_argument('-f', '--force', action='store_true', help='overwrite existing files')
    parser.add_argument('--no-save', action='store_true', help='do not save to file')

    def validate_args(args):
        # checked before the run so a bad destination does not waste one
        if args.output != None and args.output.is_dir():
            _fail(f'{args.output} is a directory, did you mean to use -d?')
        if args.directory != None and not args.directory.is_dir():
            _fail(f'output directory {args.directory} does not exist')

    def handle(args, result):
        if args.no_save:
            return False
        if args.output != None:
            return _write_result(args.output, args.force, result)
        if args.directory != None:
            return _write_result(args.directory / result_file_name(result), args.force, result)
        return False

    return validate_args, handle

def parse_count(value):
    '''Parses element counts like "16", "4K" or "1MiB" into an int.'''
    try:
        return int(value)
    except ValueError:
        if re.fullmatch(r'\s*[0-9.]+\s*[A-Za-z]+\s*', value) == None:
            raise ValueError(f'invalid count {value!r}')
        try:
            return humanfriendly.parse_size(value)
        except humanfriendly.InvalidSize as e:
            raise ValueError(str(e))

def make_cmd_category(cmd_parsers, name, title, handler_funcs):
    cmd = cmd_parsers.add_parser(name)
    category_parsers = cmd.add_subparsers(title=title, dest=title)
    category_parsers.required = True

    handlers = []
    for func in handler_funcs:
        handlers.append(func(category_parsers))

    def handle(args, command):
        if command != name:
            return False

        for handler in handlers:
            if handler(args, vars(args)[title]):
                return True

    return handle
