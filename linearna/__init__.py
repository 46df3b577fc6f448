"""Numeric vectors with paired in-place and value-returning operations."""
from .errors import *
from .base import AbstractVector
from .dense import Vector
from .sparse import SparseVector
from ._utility import load_config, reset_config
