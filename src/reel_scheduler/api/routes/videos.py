"""Video collection endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from reel_scheduler.api.deps import RepositoryDep
from reel_scheduler.logging import get_logger

router = APIRouter(prefix="/videos", tags=["Videos"])
logger = get_logger(__name__)


class VideoCollection(BaseModel):
    """The whole stored collection."""

    model_config = ConfigDict(populate_by_name=True)

    videos: list[dict[str, Any]] = Field(default_factory=list)
    version: str | None = None
    last_updated: str | None = Field(default=None, alias="lastUpdated")


class SaveVideosRequest(BaseModel):
    """Full-replace request body."""

    videos: list[dict[str, Any]]
    version: str = "1.0.0"


class SaveVideosResponse(BaseModel):
    """Full-replace response."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    last_updated: str = Field(alias="lastUpdated")


@router.get(
    "",
    response_model=VideoCollection,
    response_model_by_alias=True,
    summary="Fetch all videos",
)
async def get_videos(repository: RepositoryDep) -> VideoCollection:
    try:
        data = repository.read()
    except (OSError, ValueError) as e:
        logger.error("data_file_read_failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read data",
        ) from e
    return VideoCollection.model_validate(data)


@router.post(
    "",
    response_model=SaveVideosResponse,
    response_model_by_alias=True,
    summary="Replace all videos",
)
async def save_videos(body: SaveVideosRequest, repository: RepositoryDep) -> SaveVideosResponse:
    try:
        data = repository.replace(body.videos, body.version)
    except OSError as e:
        logger.error("data_file_write_failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save data",
        ) from e

    logger.info("videos_saved", count=len(body.videos))
    return SaveVideosResponse(
        success=True,
        message="Data saved successfully",
        last_updated=data["lastUpdated"],
    )
