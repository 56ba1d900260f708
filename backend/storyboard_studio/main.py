import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from storyboard_studio import __version__
from storyboard_studio.core.config import settings
from storyboard_studio.core.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    StoryboardStudioError,
    ValidationError,
)
from storyboard_studio.core.logging import configure_logging
from storyboard_studio.db.init_db import init_db
from storyboard_studio.api.routes import health, storyboards, scenes, characters, locations

configure_logging()
logger = logging.getLogger(__name__)

# Create DB tables on startup (no migrations yet)
init_db()

app = FastAPI(title=settings.PROJECT_NAME, version=__version__)

ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@app.exception_handler(StoryboardStudioError)
async def storyboard_studio_error_handler(request: Request, exc: StoryboardStudioError):
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


app.include_router(health.router, prefix=settings.API_V1_PREFIX)
app.include_router(storyboards.router, prefix=settings.API_V1_PREFIX)
app.include_router(scenes.router, prefix=settings.API_V1_PREFIX)
app.include_router(characters.router, prefix=settings.API_V1_PREFIX)
app.include_router(locations.router, prefix=settings.API_V1_PREFIX)


def run():
    import uvicorn

    uvicorn.run("storyboard_studio.main:app", host="0.0.0.0", port=8000)
