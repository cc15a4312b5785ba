"""
Pydantic models for request/response validation.

This module contains all Pydantic BaseModel schemas used for API request
and response validation.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class TimestampParseResponse(BaseModel):
    """Parsed timecode: seconds is null when the text holds no timecode."""
    text: str
    seconds: Optional[float] = None
    valid: bool


class TimestampFormatResponse(BaseModel):
    """Formatted timecode for a seconds value."""
    seconds: float
    timestamp: str


class TimestampShiftRequest(BaseModel):
    """Request model for shifting every timecode in a block of subtitle text."""
    text: str = Field(..., description="Subtitle text, e.g. SRT or VTT cue lines")
    offset: float = Field(..., allow_inf_nan=False, description="Seconds to add (negative moves earlier)")


class TimestampShiftResponse(BaseModel):
    text: str
    offset: float
    shifted: int = Field(..., description="Number of timecodes rewritten")


class TextRequest(BaseModel):
    """Request model carrying a single block of text."""
    text: str = Field(..., description="Input text")


class WordsRequest(BaseModel):
    """Request model for printing-word segmentation."""
    text: str = Field(..., description="Subtitle text to segment")
    normalize_newlines: bool = Field(False, description="Convert CRLF/CR to LF before segmenting")


class WordsResponse(BaseModel):
    """Printing words in order; joining them rebuilds the (normalized) text."""
    words: List[str]
    count: int


class EscapeResponse(BaseModel):
    text: str
    escaped: str


class NormalizeResponse(BaseModel):
    text: str


class SystemInfoResponse(BaseModel):
    """Host environment details for the desktop UI."""
    version: str
    os_type: str
    path_separator: str
    ctrl_key: str
    config_dir: str


class ConfigDirResponse(BaseModel):
    config_dir: str
    created: bool
