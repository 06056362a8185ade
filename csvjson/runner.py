# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.
"""

import sys
import logging

from csvjson.configuration import get_file_data, check_if_valid_file
from csvjson.errors import CsvJsonError
from csvjson.pipeline import run_pipeline
from csvjson.utils.log_utils import logging_config

__all__ = ['run_csv2json']


def exit_gracefully(err, stream=None):
    stream = stream or sys.stderr
    stream.write("error: {}\n".format(err))
    return 1


def run_csv2json(argv=None):
    """Command-line entry point for ``csv2json``. Returns the process exit status."""
    try:
        run_config = get_file_data(argv)
    except CsvJsonError as e:
        return exit_gracefully(e)
    logging_config(folder=run_config.log_dir, name='csv2json', level=run_config.log_level)
    spec = run_config.input_spec
    try:
        check_if_valid_file(spec.filepath)
        result = run_pipeline(spec)
    except CsvJsonError as e:
        return exit_gracefully(e)
    if result.skipped:
        logging.info("{} malformed rows skipped".format(result.skipped))
    return 0
