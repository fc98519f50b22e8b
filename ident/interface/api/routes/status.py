"""Status routes."""

from fastapi import APIRouter

from ident.config import API_PREFIX

router = APIRouter(prefix=API_PREFIX, tags=["status"])


@router.get("")
async def status_check() -> dict:
    """Report that the identity service is up.

    Returns:
        An empty JSON object
    """
    return {}
