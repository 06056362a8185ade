"""
Copyright (c) 2019 The MITRE Corporation.
"""

import argparse

def get_base_argparser():
    parser = argparse.ArgumentParser()
    parser.add_argument('--log_level', type=str, help='Logging level (info, debug, error, warning)', default=None)
    parser.add_argument('--log_dir', type=str, help='Also write a log file into this directory (default None)', default=None)
    parser.add_argument('--config', type=str, help='YAML file providing default option values', default=None)
    return parser
