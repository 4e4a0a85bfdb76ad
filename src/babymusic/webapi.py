"""Web API for the mode playlists."""

import re
import threading
from contextlib import asynccontextmanager
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__, config
from .catalog import CatalogService
from .errors import (
    EmptyCandidateSetError,
    StorageError,
    ValidationError,
    log_error,
)
from .logging_config import get_logger
from .selection import select_next
from .store import PlaylistStore

logger = get_logger(__name__)

ORIGIN_PATTERN = re.compile(config.ALLOWED_ORIGIN_REGEX)

_catalog: Optional[CatalogService] = None
_catalog_lock = threading.Lock()


class AddUrlRequest(BaseModel):
    """Request model for adding a video to a mode."""

    # Not typed as str so that non-string values get a 400 from the handler
    video_id: Any = Field(default=None, alias="videoId")


class UrlItem(BaseModel):
    """A video in a mode listing."""

    id: int
    videoId: str


class UrlEntry(UrlItem):
    """A newly stored video."""

    mode: str


class DeleteResponse(BaseModel):
    """Response model for deletions."""

    success: bool


class NextVideoResponse(BaseModel):
    """Response model for the next video to play."""

    videoId: str


def get_catalog() -> CatalogService:
    """Get the catalog, creating and seeding the store on first use.

    Returns:
        CatalogService: Shared catalog service
    """
    global _catalog
    with _catalog_lock:
        if _catalog is None:
            catalog = CatalogService(PlaylistStore())
            catalog.bootstrap()
            _catalog = catalog
    return _catalog


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the database before serving requests."""
    get_catalog()
    yield


app = FastAPI(title="Baby Music", version=__version__, lifespan=lifespan)


@app.middleware("http")
async def reject_foreign_origins(request: Request, call_next):
    """Reject browser requests from origins outside the local network."""
    origin = request.headers.get("origin")
    # Requests without an origin (curl, native apps) are allowed
    if origin and not ORIGIN_PATTERN.match(origin):
        logger.warning("Rejected request from origin %s", origin)
        return JSONResponse(status_code=403, content={"detail": "Not allowed by CORS"})
    return await call_next(request)


app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=config.ALLOWED_ORIGIN_REGEX,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)

router = APIRouter(prefix=config.API_PREFIX, tags=["urls"])


@router.get("/urls/{mode}", response_model=List[UrlItem])
def list_urls(mode: str, catalog: CatalogService = Depends(get_catalog)) -> List[UrlItem]:
    """List the videos of a mode in insertion order."""
    try:
        entries = catalog.list_urls(mode)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        log_error(e, "Error fetching URLs")
        raise HTTPException(status_code=500, detail="Failed to fetch URLs")

    return [UrlItem(id=entry.id, videoId=entry.video_id) for entry in entries]


@router.post("/urls/{mode}", response_model=UrlEntry)
def add_url(
    mode: str,
    request: Optional[AddUrlRequest] = None,
    catalog: CatalogService = Depends(get_catalog),
) -> UrlEntry:
    """Add a video URL or ID to a mode."""
    if request is None or not request.video_id:
        raise HTTPException(status_code=400, detail="videoId is required")
    if not isinstance(request.video_id, str):
        raise HTTPException(status_code=400, detail="videoId must be a string")

    try:
        entry = catalog.add_url(mode, request.video_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        log_error(e, "Error adding URL")
        raise HTTPException(status_code=500, detail="Failed to add URL")

    return UrlEntry(id=entry.id, mode=entry.mode, videoId=entry.video_id)


@router.get("/urls/{mode}/next", response_model=NextVideoResponse)
def next_video(
    mode: str,
    current: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog),
) -> NextVideoResponse:
    """Pick the next video of a mode, avoiding the one currently playing."""
    try:
        video_ids = catalog.video_ids(mode)
        video_id = select_next(video_ids, current)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EmptyCandidateSetError:
        raise HTTPException(status_code=404, detail=f"No videos available for mode {mode}")
    except StorageError as e:
        log_error(e, "Error selecting next video")
        raise HTTPException(status_code=500, detail="Failed to fetch URLs")

    return NextVideoResponse(videoId=video_id)


@router.delete("/urls/{mode}/{entry_id}", response_model=DeleteResponse)
def delete_url(
    mode: str, entry_id: int, catalog: CatalogService = Depends(get_catalog)
) -> DeleteResponse:
    """Delete a video by id. Deleting a missing id succeeds."""
    try:
        catalog.remove_url(mode, entry_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        log_error(e, "Error deleting URL")
        raise HTTPException(status_code=500, detail="Failed to delete URL")

    return DeleteResponse(success=True)


app.include_router(router)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
