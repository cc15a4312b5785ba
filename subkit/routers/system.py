"""
System router module.

This module provides endpoints for:
- Reporting version and host environment details to the UI
- Bootstrapping the application config directory
"""

import os
from fastapi import APIRouter, Depends, HTTPException

from subkit.dependencies import verify_api_key
from subkit.config import get_settings
from subkit.models.schemas import SystemInfoResponse, ConfigDirResponse
from subkit.utils.platform_utils import (
    get_version,
    get_os_type,
    get_path_separator,
    get_ctrl_key,
    ensure_config_directory_exists,
)


router = APIRouter(prefix="/system", tags=["System"])


@router.get("/info", response_model=SystemInfoResponse)
async def system_info(_: bool = Depends(verify_api_key)):
    """Return version, OS family, path separator, shortcut modifier and config dir."""
    return SystemInfoResponse(
        version=get_version(),
        os_type=get_os_type(),
        path_separator=get_path_separator(),
        ctrl_key=get_ctrl_key(),
        config_dir=get_settings().config_dir
    )


@router.post("/config-dir", response_model=ConfigDirResponse)
async def config_dir(_: bool = Depends(verify_api_key)):
    """
    Create the config directory if it does not exist yet.

    Returns:
        The directory path and whether this call created it.

    Raises:
        HTTPException: 500 if the directory cannot be created
    """
    path = get_settings().config_dir
    existed = os.path.isdir(path)
    try:
        ensure_config_directory_exists(path)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Failed to create config directory: {str(e)}")

    return ConfigDirResponse(config_dir=path, created=not existed)
