# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.

Greeting and directory listing demo.
"""

import os
import sys

from csvjson.common_params import get_base_argparser
from csvjson.utils.log_utils import logging_config

__all__ = ['get_hello_argparser', 'run_hello']


def get_hello_argparser():
    parser = get_base_argparser()
    parser.description = 'Say hello, or list the current directory'
    parser.add_argument('--name', type=str, help='The name of the passed in user', default='Valentine')
    parser.add_argument('command', nargs='?', type=str, default=None, help='Optional command: list')
    return parser


def run_hello(argv=None, out=None):
    out = out or sys.stdout
    args = get_hello_argparser().parse_args(argv)
    logging_config(folder=args.log_dir, name='hello', level=args.log_level or 'warning')
    if args.command is None:
        out.write("Hello, {}!\n".format(args.name))
    elif args.command == 'list':
        for name in sorted(os.listdir('.')):
            out.write(name + '\n')
    else:
        out.write("Check documentation\n")
    return 0
