"""
API main router
"""

from fastapi import APIRouter

from codequest_api.api.endpoints import hello, projects, tasks, users

api_router = APIRouter()

api_router.include_router(hello.router, tags=["Hello"])
api_router.include_router(users.router, tags=["Users"])
api_router.include_router(projects.router, tags=["Projects"])
api_router.include_router(tasks.router, tags=["Tasks"])
