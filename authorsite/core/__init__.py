"""
authorsite Core
===============

Configuration, storage, logging, identity and validation shared by the
route modules.
"""

from .config import Config
from .database import Database
from .errors import StoreFailure, ValidationError
from .identity import RequestIdentity, current_identity
from .logging_service import LoggingService, db_log

__all__ = [
    'Config', 'Database', 'LoggingService', 'RequestIdentity', 'StoreFailure',
    'ValidationError', 'current_identity', 'db_log',
]
