"""Data models and schemas for the Mochow client."""

from . import schemas, responses, search
from .schemas import *
from .responses import *
from .search import *

__all__ = schemas.__all__ + responses.__all__ + search.__all__
