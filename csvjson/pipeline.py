# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.

Two-stage conversion pipeline: a reader thread parses CSV rows into records
and hands them, one at a time, to a writer thread that streams them into a
JSON array.
"""

import logging
import threading
from typing import NamedTuple, Optional

from csvjson.channel import Channel
from csvjson.configuration import InputSpec, SEPARATORS, check_encoding, check_if_valid_file
from csvjson.errors import PipelineAborted, UsageError
from csvjson.reader import process_csv_file, ReaderStats
from csvjson.utils.csv2json import json_path_for
from csvjson.writer import write_json_file

__all__ = ['ConversionResult', 'run_pipeline', 'convert']


class ConversionResult(NamedTuple):
    json_path: str
    records: int
    skipped: int


class _Failure(object):
    """First worker failure of a run. Recording it aborts the channel and raises ``done``."""
    def __init__(self, channel, done):
        self.channel = channel
        self.done = done
        self.error: Optional[BaseException] = None
        self._lock = threading.Lock()

    def record(self, worker_name, error):
        with self._lock:
            if self.error is not None:
                return
            logging.debug("{} failed: {}".format(worker_name, error))
            self.error = error
        self.channel.abort()
        self.done.set()


class _Worker(threading.Thread):
    """Runs ``fn`` and records its failure instead of letting the thread die silently.

    A worker interrupted by :py:class:`PipelineAborted` stops quietly: its peer
    failed first and has already raised the completion signal.
    """
    def __init__(self, name, fn, failure):
        super(_Worker, self).__init__(name=name, daemon=True)
        self.fn = fn
        self.failure = failure
        self.result = None

    def run(self):
        try:
            self.result = self.fn()
        except PipelineAborted:
            pass
        except Exception as e:
            self.failure.record(self.name, e)


def run_pipeline(input_spec: InputSpec) -> ConversionResult:
    """Convert ``input_spec.filepath`` to JSON and block until the output file is closed.

    Raises:
        FatalIO: reading or writing failed; the partially written output is left as is
    """
    channel = Channel()
    done = threading.Event()
    failure = _Failure(channel, done)
    stats = ReaderStats()
    reader = _Worker('csv-reader', lambda: process_csv_file(input_spec, channel, stats), failure)
    writer = _Worker('json-writer',
                     lambda: write_json_file(input_spec.filepath, channel, done, input_spec.pretty),
                     failure)
    reader.start()
    writer.start()
    done.wait()
    # a reader failure can raise done before the writer has unwound
    reader.join()
    writer.join()
    if failure.error is not None:
        raise failure.error
    return ConversionResult(json_path_for(input_spec.filepath), writer.result, stats.skipped)


def convert(filepath: str, separator: str = 'comma', pretty: bool = False,
            encoding: str = 'utf-8') -> ConversionResult:
    """Validate ``filepath`` and convert it to a ``.json`` file alongside it.

    Raises:
        UsageError: unknown separator or encoding
        ValidationError: not a ``.csv`` file or the file does not exist
    """
    if separator not in SEPARATORS:
        raise UsageError("separator has to be either comma or semicolon")
    check_encoding(encoding)
    check_if_valid_file(filepath)
    return run_pipeline(InputSpec(filepath, separator, pretty, encoding))
