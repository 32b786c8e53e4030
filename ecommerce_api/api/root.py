# ecommerce_api/api/root.py

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

RUNNING_MESSAGE = "E-commerce API is running..."

router = APIRouter(tags=["status"])


@router.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    """
    Plain-text liveness message for the API root.
    """
    return RUNNING_MESSAGE
