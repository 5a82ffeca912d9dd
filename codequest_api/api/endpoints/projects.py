"""
Project endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codequest_api.core.database import get_db
from codequest_api.models.project import Project, ProjectRead
from codequest_api.services.listing import list_all_ordered_by_id

router = APIRouter()


@router.get("/projects", response_model=list[ProjectRead], summary="List all projects")
async def get_projects(db: AsyncSession = Depends(get_db)):
    """
    Retrieve all projects, ordered by id
    """
    return await list_all_ordered_by_id(db, Project, ProjectRead)
