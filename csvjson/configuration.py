# coding: utf-8
# Copyright (c) 2019 The MITRE Corporation.
"""
Command-line and YAML configuration for the CSV to JSON converter.
"""

import codecs
import io
import os
import yaml
from typing import NamedTuple, Optional, Dict, Any, List

from csvjson.common_params import get_base_argparser
from csvjson.errors import UsageError, ValidationError

__all__ = ['InputSpec', 'RunConfig', 'SEPARATORS', 'get_csv2json_argparser', 'load_config',
           'get_file_data', 'check_encoding', 'check_if_valid_file']

SEPARATORS = {'comma': ',', 'semicolon': ';'}

DEFAULTS = {
    'separator': 'comma',
    'pretty': False,
    'encoding': 'utf-8',
    'log_level': 'info',
}


class InputSpec(NamedTuple):
    """What to convert and how.

    Parameters:
        filepath: Path to the input ``.csv`` file
        separator: Either ``comma`` or ``semicolon``
        pretty: Indent the JSON output
        encoding: Character encoding of the input file
    """
    filepath: str
    separator: str
    pretty: bool
    encoding: str = 'utf-8'

    @property
    def delimiter(self) -> str:
        return SEPARATORS[self.separator]


class RunConfig(NamedTuple):
    input_spec: InputSpec
    log_level: str = 'info'
    log_dir: Optional[str] = None


def get_csv2json_argparser():
    parser = get_base_argparser()
    parser.description = 'Convert a CSV file into a JSON array of objects written alongside it'
    parser.add_argument('--separator', type=str, help='Column separator: comma or semicolon (default = comma)', default=None)
    parser.add_argument('--pretty', action='store_true', help='Prettify JSON output', default=None)
    parser.add_argument('--encoding', type=str, help='Input file encoding (default = utf-8)', default=None)
    parser.add_argument('csv_file', nargs='?', type=str, help='CSV input file', default=None)
    return parser


def load_config(c_file: str) -> Dict[str, Any]:
    """Read option defaults from a YAML mapping.

    Parameters:
        c_file: Path to the YAML file

    Returns:
        Dictionary restricted to the known option names
    """
    try:
        with io.open(c_file, 'r') as fp:
            cd = yaml.safe_load(fp)
    except (OSError, yaml.YAMLError) as e:
        raise UsageError("Unable to read configuration file {}: {}".format(c_file, e))
    if cd is None:
        return {}
    if not isinstance(cd, dict):
        raise UsageError("Configuration file {} must contain a mapping".format(c_file))
    unknown = set(cd) - set(DEFAULTS)
    if unknown:
        raise UsageError("Unknown configuration keys in {}: {}".format(c_file, ', '.join(sorted(unknown))))
    for k, v in cd.items():
        expected = bool if k == 'pretty' else str
        if not isinstance(v, expected):
            raise UsageError("Configuration value {} in {} must be a {}, got {!r}"
                             .format(k, c_file, expected.__name__, v))
    return cd


def check_encoding(encoding: str) -> str:
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        raise UsageError("unknown encoding: {}".format(encoding))


def get_file_data(argv: Optional[List[str]] = None) -> RunConfig:
    """Parse the command line (and optional ``--config`` file) into an immutable :py:class:`RunConfig`.

    Explicit flags take precedence over configuration file values, which take
    precedence over the built-in defaults.

    Raises:
        UsageError: no input file was given, or the separator or encoding is not recognized
    """
    args = get_csv2json_argparser().parse_args(argv)
    if args.csv_file is None:
        raise UsageError("a file path argument is required")
    options = dict(DEFAULTS)
    if args.config:
        options.update(load_config(args.config))
    for k in DEFAULTS:
        v = getattr(args, k)
        if v is not None:
            options[k] = v
    if options['separator'] not in SEPARATORS:
        raise UsageError("separator has to be either comma or semicolon")
    check_encoding(options['encoding'])
    spec = InputSpec(args.csv_file, options['separator'], options['pretty'], options['encoding'])
    return RunConfig(spec, options['log_level'], args.log_dir)


def check_if_valid_file(filename: str) -> bool:
    if os.path.splitext(filename)[1] != '.csv':
        raise ValidationError("file {} is not CSV".format(filename))
    if not os.path.isfile(filename):
        raise ValidationError("file {} does not exist".format(filename))
    return True
