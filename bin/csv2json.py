# coding: utf-8

import sys

from csvjson.runner import run_csv2json


if __name__ == '__main__':
    sys.exit(run_csv2json(sys.argv[1:]))
