"""
Greeting endpoint
"""

from fastapi import APIRouter, Request

from codequest_api.models.hello import HelloRead

router = APIRouter()


@router.get("/hello", response_model=HelloRead, summary="Hello message")
async def hello(request: Request):
    """
    Static greeting; touches no database
    """
    return HelloRead(message=request.app.state.settings.GREETING)
