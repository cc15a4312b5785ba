"""
Models package for API request/response validation.

This package contains Pydantic models used throughout the application
for validating API requests and responses.
"""

from .schemas import (
    TimestampParseResponse,
    TimestampFormatResponse,
    TimestampShiftRequest,
    TimestampShiftResponse,
    TextRequest,
    WordsRequest,
    WordsResponse,
    EscapeResponse,
    NormalizeResponse,
    SystemInfoResponse,
    ConfigDirResponse,
)

__all__ = [
    "TimestampParseResponse",
    "TimestampFormatResponse",
    "TimestampShiftRequest",
    "TimestampShiftResponse",
    "TextRequest",
    "WordsRequest",
    "WordsResponse",
    "EscapeResponse",
    "NormalizeResponse",
    "SystemInfoResponse",
    "ConfigDirResponse",
]
