# coding: utf-8


from .errors import *
from .configuration import *
from .pipeline import *
from .utils import *

__all__ = errors.__all__ + configuration.__all__ + pipeline.__all__ + utils.__all__
