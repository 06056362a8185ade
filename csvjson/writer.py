# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.
"""

import io
import logging

from csvjson.errors import FatalIO
from csvjson.utils.csv2json import get_json_func, json_path_for

__all__ = ['write_json_file', 'create_string_writer']


def create_string_writer(json_path):
    """Open ``json_path`` for writing and return ``write(data, close)``.

    ``close=True`` closes the file after writing ``data``.
    """
    try:
        fp = io.open(json_path, 'w', encoding='utf-8', newline='')
    except OSError as e:
        raise FatalIO("unable to create {}: {}".format(json_path, e))

    def write_string(data, close=False):
        try:
            fp.write(data)
        except OSError as e:
            fp.close()
            raise FatalIO("error writing {}: {}".format(json_path, e))
        if close:
            fp.close()
    write_string.file = fp
    return write_string


def write_json_file(csv_path, channel, done, pretty=False):
    """Drain ``channel`` into a JSON array written next to ``csv_path``.

    Parameters:
        csv_path: Path of the CSV input; output goes to the same path with a ``.json`` extension
        channel: Iterable of records, exhausted when the producer closes it
        done: ``threading.Event`` set once the array is complete and the file closed
        pretty: Indent records and put each on its own lines

    Returns:
        Number of records written
    """
    json_path = json_path_for(csv_path)
    write_string = create_string_writer(json_path)
    json_func, break_line = get_json_func(pretty)
    logging.info("Writing JSON file {} ...".format(json_path))
    n = 0
    try:
        write_string('[' + break_line)
        for record in channel:
            if n > 0:
                write_string(',' + break_line)
            try:
                js = json_func(record)
            except (TypeError, ValueError) as e:
                raise FatalIO("unable to serialize record {}: {}".format(n, e))
            write_string(js)
            n += 1
        write_string(break_line + ']', close=True)
    finally:
        write_string.file.close()
    logging.info("Completed! {} records written to {}".format(n, json_path))
    done.set()
    return n
