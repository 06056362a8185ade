# coding: utf-8
"""
Copyright (c) 2019 The MITRE Corporation.
"""


from .log_utils import *
from .csv2json import *

__all__ = log_utils.__all__ + csv2json.__all__
