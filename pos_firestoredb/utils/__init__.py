"""
Database utilities module.

This module contains the helpers shared by every repository:
- Configuration loading and error policies
- Logging and timing
- Standard responses and error codes
- Payload normalization around Firestore reads and writes
"""

from .config import FirebaseConfig, PersistenceErrorPolicy, get_config
from .error_codes import ErrorCodes, InvalidEntityError
from .logger import logger
from .normalization import ABSENT, from_timestamps, strip_absent, to_document, to_timestamps
from .standard_response import StandardResponse
from .time_it import time_it

__all__ = [
    "FirebaseConfig",
    "PersistenceErrorPolicy",
    "get_config",
    "ErrorCodes",
    "InvalidEntityError",
    "logger",
    "ABSENT",
    "from_timestamps",
    "strip_absent",
    "to_document",
    "to_timestamps",
    "StandardResponse",
    "time_it",
]
