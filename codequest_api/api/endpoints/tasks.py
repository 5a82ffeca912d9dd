"""
Task endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codequest_api.core.database import get_db
from codequest_api.models.task import Task, TaskRead
from codequest_api.services.listing import list_all_ordered_by_id

router = APIRouter()


@router.get("/tasks", response_model=list[TaskRead], summary="List all tasks")
async def get_tasks(db: AsyncSession = Depends(get_db)):
    """
    Retrieve all tasks, ordered by id
    """
    return await list_all_ordered_by_id(db, Task, TaskRead)
