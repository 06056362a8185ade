# coding: utf-8

import sys

from csvjson.hello import run_hello


if __name__ == '__main__':
    sys.exit(run_hello(sys.argv[1:]))
