"""
Text router module.

This module provides endpoints for:
- Splitting subtitle text into printing words
- Escaping text for literal use inside a search pattern
- Normalizing line endings
"""

from fastapi import APIRouter, Depends

from subkit.dependencies import verify_api_key
from subkit.models.schemas import (
    TextRequest,
    WordsRequest,
    WordsResponse,
    EscapeResponse,
    NormalizeResponse,
)
from subkit.utils.text_utils import split_printing_words, escape_regexp, normalize_newlines


router = APIRouter(prefix="/text", tags=["Text"])


@router.post("/words", response_model=WordsResponse)
async def words(
    request: WordsRequest,
    _: bool = Depends(verify_api_key)
):
    """
    Split text into printing words for word-level highlighting.

    Spaces stay on the preceding word, newlines are separate entries and
    Han characters are returned one per entry.
    """
    text = normalize_newlines(request.text) if request.normalize_newlines else request.text
    result = split_printing_words(text)
    return WordsResponse(words=result, count=len(result))


@router.post("/escape", response_model=EscapeResponse)
async def escape(
    request: TextRequest,
    _: bool = Depends(verify_api_key)
):
    """Escape regex metacharacters so the text can be searched literally."""
    return EscapeResponse(text=request.text, escaped=escape_regexp(request.text))


@router.post("/normalize-newlines", response_model=NormalizeResponse)
async def normalize(
    request: TextRequest,
    _: bool = Depends(verify_api_key)
):
    """Convert CRLF and CR line endings to LF."""
    return NormalizeResponse(text=normalize_newlines(request.text))
