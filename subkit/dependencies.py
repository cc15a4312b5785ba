"""
FastAPI dependency injection functions.

Every subkit endpoint except the welcome route requires the X-API-Key header
to match the API_KEY setting.
"""

import secrets
from typing import Optional
from fastapi import Header, HTTPException
from subkit.config import get_settings


def verify_api_key(x_api_key: Optional[str] = Header(None)) -> bool:
    """
    Check the X-API-Key header against settings.api_key.

    Raises:
        HTTPException 500 if API_KEY is not configured
        HTTPException 401 if the header is missing or does not match
    """
    expected_key = get_settings().api_key
    if not expected_key:
        raise HTTPException(status_code=500, detail="API key not configured")
    if not x_api_key or not secrets.compare_digest(x_api_key.encode(), expected_key.encode()):
        raise HTTPException(status_code=401, detail="Invalid API Key")
    return True
