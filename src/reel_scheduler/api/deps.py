"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from reel_scheduler.api.repository import DataFileRepository


def get_repository(request: Request) -> DataFileRepository:
    """Get the data file repository attached to the app."""
    return request.app.state.repository


RepositoryDep = Annotated[DataFileRepository, Depends(get_repository)]
