import time
import uuid
import asyncio
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from subkit.config import get_settings
from subkit.routers import timestamps_router, text_router, system_router
from subkit.utils.async_utils import timeout
from subkit.utils.logging_utils import setup_logger, get_request_logger
from subkit.utils.platform_utils import ensure_config_directory_exists, get_version

# Load environment variables from .env file
load_dotenv()

settings = get_settings()
base_logger = setup_logger(log_level=settings.log_level, logger_name=settings.app_name)

app = FastAPI(title="subkit", version=get_version())

# CORS configuration
app.add_middleware(CORSMiddleware,
    allow_origins=[settings.allowed_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(timestamps_router)
app.include_router(text_router)
app.include_router(system_router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Tag each request with a short id and log method, path, status and duration."""
    request_id = uuid.uuid4().hex[:8]
    logger = get_request_logger(request_id, base_logger)
    start = time.perf_counter()

    response = await call_next(request)

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    response.headers["X-Request-ID"] = request_id
    return response


# Application lifecycle events
@app.on_event("startup")
async def startup_event():
    """Create the config directory, giving up after RACE_TIMEOUT_SECONDS."""
    settings = get_settings()
    logger = get_request_logger("startup", base_logger)
    logger.info(f"Starting subkit {get_version()}")

    try:
        config_dir = await timeout(
            settings.race_timeout_seconds,
            asyncio.to_thread(ensure_config_directory_exists, settings.config_dir)
        )
        logger.info(f"Config directory: {config_dir}")
    except asyncio.TimeoutError:
        logger.warning(f"Config directory not ready after {settings.race_timeout_seconds}s: {settings.config_dir}")
    except OSError as e:
        logger.warning(f"Failed to create config directory {settings.config_dir}: {str(e)}")


@app.get("/")
async def root():
    return {"message": "Welcome to the subkit API. Use /timestamps/parse?text=<timecode> or POST /text/words to get started."}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="::", port=8000)
