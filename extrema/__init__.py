# __init__.py
from .base import *
from .array import *

from . import base
from . import array
