"""
Gateway user endpoints.

Routes:
- GET /users/search - Forward a compound-key search
- GET /users/{user_id} - Forward a fetch by identifier

Dependencies: fastapi, userdir.gateway.forwarding_gateway
System role: Gateway HTTP API re-shaping upstream envelopes
"""

import logging
from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, Query

from userdir.gateway.dependencies import get_forwarding_gateway
from userdir.gateway.error_handling import handle_gateway_errors
from userdir.gateway.forwarding_gateway import ForwardingGateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/search")
@handle_gateway_errors
async def search_users(
    first_name: str = Query(..., alias="firstName", min_length=1),
    last_name: str = Query(..., alias="lastName", min_length=1),
    date_of_birth: date | None = Query(None, alias="dateOfBirth"),
    gateway: ForwardingGateway = Depends(get_forwarding_gateway),
) -> list[dict[str, Any]]:
    """
    Search users through the upstream directory.

    Args:
        first_name: First name (required)
        last_name: Last name (required)
        date_of_birth: Optional date of birth filter
        gateway: Injected ForwardingGateway

    Returns:
        list[dict]: Matching users as returned upstream
    """
    params: dict[str, Any] = {"firstName": first_name, "lastName": last_name}
    if date_of_birth is not None:
        params["dateOfBirth"] = date_of_birth.isoformat()

    data = await gateway.call("searchUsers", params)
    users = (data or {}).get("searchUsers") or []
    logger.info("Search forwarded", extra={"count": len(users)})
    return users


@router.get("/{user_id}")
@handle_gateway_errors
async def get_user(
    user_id: str,
    gateway: ForwardingGateway = Depends(get_forwarding_gateway),
) -> dict[str, Any] | None:
    """
    Fetch one user through the upstream directory.

    Args:
        user_id: User identifier
        gateway: Injected ForwardingGateway

    Returns:
        dict: User as returned upstream
    """
    data = await gateway.call("userById", {"id": user_id})
    return (data or {}).get("userById")
