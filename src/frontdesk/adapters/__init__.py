from .base import FrontDeskAdapter
from .sqlite_adapter import SQLiteFrontDeskAdapter

__all__ = [
    "FrontDeskAdapter",
    "SQLiteFrontDeskAdapter",
]
