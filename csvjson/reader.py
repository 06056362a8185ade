# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.
"""

import csv
import io
import logging

from csvjson.errors import FatalIO, MalformedInput, RowSkip
from csvjson.utils.csv2json import process_line

__all__ = ['process_csv_file', 'ReaderStats']


class ReaderStats(object):
    def __init__(self):
        self.records = 0
        self.skipped = 0


def process_csv_file(input_spec, channel, stats=None):
    """Read ``input_spec.filepath`` and send one record per valid data row on ``channel``.

    The channel is closed once the end of the file is reached. Rows whose
    number of cells differs from the header are logged and dropped.

    Parameters:
        input_spec: :py:class:`csvjson.configuration.InputSpec`
        channel: :py:class:`csvjson.channel.Channel` (anything with ``send`` and ``close``)
        stats: Optional :py:class:`ReaderStats` updated as rows are read

    Raises:
        MalformedInput: the header row is missing or cannot be parsed
        FatalIO: any other read error
    """
    stats = stats if stats is not None else ReaderStats()
    try:
        with io.open(input_spec.filepath, 'r', encoding=input_spec.encoding, newline='') as fp:
            # csv yields [] for blank lines; they are not rows
            reader = csv.reader(fp, delimiter=input_spec.delimiter)
            rows = (row for row in reader if row)
            try:
                headers = next(rows)
            except StopIteration:
                raise MalformedInput("file {} has no header row".format(input_spec.filepath))
            except (csv.Error, UnicodeDecodeError) as e:
                raise MalformedInput("unable to read header of {}: {}".format(input_spec.filepath, e))
            logging.debug("Headers: {}".format(headers))
            for line in rows:
                try:
                    record = process_line(headers, line)
                except RowSkip as e:
                    stats.skipped += 1
                    logging.warning("Line {}: {} Error: {}".format(reader.line_num, line, e))
                    continue
                channel.send(record)
                stats.records += 1
    except (OSError, LookupError, csv.Error, UnicodeDecodeError) as e:
        raise FatalIO("error reading {}: {}".format(input_spec.filepath, e))
    channel.close()
    return stats
