"""
Timestamps router module.

This module provides endpoints for:
- Parsing a timecode out of a line of text
- Formatting seconds as a timecode
- Shifting every timecode in a block of subtitle text
"""

from typing import Optional
from fastapi import APIRouter, Query, Depends, HTTPException

from subkit.dependencies import verify_api_key
from subkit.config import get_settings
from subkit.models.schemas import (
    TimestampParseResponse,
    TimestampFormatResponse,
    TimestampShiftRequest,
    TimestampShiftResponse,
)
from subkit.utils.timestamp_utils import (
    TIMECODE_PATTERN,
    parse_timestamp,
    format_timestamp,
    shift_timestamps,
)


router = APIRouter(prefix="/timestamps", tags=["Timestamps"])


@router.get("/parse", response_model=TimestampParseResponse)
async def parse_text(
    text: str = Query(..., description="Text holding an HH:MM:SS,fff or HH:MM:SS.fff timecode"),
    _: bool = Depends(verify_api_key)
):
    """
    Parse the first timecode found in text.

    Text without a timecode is not an error: the response has seconds=null
    and valid=false.
    """
    seconds = parse_timestamp(text)
    return TimestampParseResponse(text=text, seconds=seconds, valid=seconds is not None)


@router.get("/format", response_model=TimestampFormatResponse)
async def format_seconds(
    seconds: float = Query(..., ge=0, description="Non-negative seconds to format"),
    digits: Optional[int] = Query(None, ge=0, le=9, description="Fractional digits (default from settings)"),
    separator: Optional[str] = Query(None, pattern=r"^[.,]$", description="'.' (VTT) or ',' (SRT)"),
    _: bool = Depends(verify_api_key)
):
    """Format seconds as HH:MM:SS<separator><fraction>."""
    settings = get_settings()
    if digits is None:
        digits = settings.fraction_digits
    if separator is None:
        separator = settings.fraction_separator

    try:
        timestamp = format_timestamp(seconds, digits, separator)
    except (ValueError, ArithmeticError) as e:
        # Decimal rejects values too large to quantize at this precision
        raise HTTPException(status_code=422, detail=f"Cannot format {seconds}: {str(e)}")

    return TimestampFormatResponse(seconds=seconds, timestamp=timestamp)


@router.post("/shift", response_model=TimestampShiftResponse)
async def shift_text(
    request: TimestampShiftRequest,
    _: bool = Depends(verify_api_key)
):
    """
    Move every timecode in the text by offset seconds.

    Each timecode keeps its separator and fraction width; results are
    clamped at 00:00:00.
    """
    try:
        shifted_text = shift_timestamps(request.text, request.offset)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Timestamp shift failed: {str(e)}")

    return TimestampShiftResponse(
        text=shifted_text,
        offset=request.offset,
        shifted=len(TIMECODE_PATTERN.findall(request.text))
    )
