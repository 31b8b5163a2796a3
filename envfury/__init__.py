"""
ABOUTME: Typed environment variable retrieval with structured errors
ABOUTME: Provides maybe/must/or_/or_else/or_parse lookups and custom parsing overrides
"""

import logging

from .config import maybe, must, or_, or_else, or_parse
from .custom import Custom, CustomParse, register, unregister
from .exceptions import (
    ConfigError,
    Error,
    MustReason,
    NonUnicode,
    NotSet,
    OrParseReason,
    Parse,
    ParseDefault,
    Reason,
    Value,
    ValueReason,
)
from .parsing import parse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "maybe",
    "must",
    "or_",
    "or_else",
    "or_parse",
    "parse",
    "Custom",
    "CustomParse",
    "register",
    "unregister",
    "ConfigError",
    "Error",
    "Reason",
    "ValueReason",
    "MustReason",
    "OrParseReason",
    "NonUnicode",
    "Parse",
    "NotSet",
    "Value",
    "ParseDefault",
]
