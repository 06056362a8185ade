# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.
"""

import json
import os

from csvjson.errors import RowSkip

__all__ = ['process_line', 'get_json_func', 'json_path_for', 'PRETTY_INDENT']

PRETTY_INDENT = '   '


def process_line(headers, row):
    """Map each header to the matching cell of ``row``, keeping header order."""
    if len(row) != len(headers):
        raise RowSkip(row, len(headers))
    record = {}
    for name, value in zip(headers, row):
        record[name] = value
    return record


def _compact(record):
    return json.dumps(record, separators=(',', ':'), ensure_ascii=False)


def _pretty(record):
    js = json.dumps(record, indent=len(PRETTY_INDENT), ensure_ascii=False)
    return '\n'.join(PRETTY_INDENT + line for line in js.split('\n'))


def get_json_func(pretty):
    """Return the record serializer and the line break placed between array elements."""
    if pretty:
        return _pretty, '\n'
    return _compact, ''


def json_path_for(csv_path):
    json_dir = os.path.dirname(csv_path)
    base = os.path.basename(csv_path)
    if base.endswith('.csv'):
        base = base[:-len('.csv')]
    return os.path.join(json_dir, base + '.json')
