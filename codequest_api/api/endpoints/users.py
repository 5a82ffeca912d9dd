"""
User endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codequest_api.core.database import get_db
from codequest_api.models.user import User, UserRead
from codequest_api.services.listing import list_all_ordered_by_id

router = APIRouter()


@router.get("/users", response_model=list[UserRead], summary="List all users")
async def get_users(db: AsyncSession = Depends(get_db)):
    """
    Retrieve all users, ordered by id
    """
    return await list_all_ordered_by_id(db, User, UserRead)
