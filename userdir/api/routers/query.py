"""
Query API endpoint.

Routes:
- POST /query - Execute a query document against the directory

Always answers 200 with a ``{data, errors}`` envelope; failures are
reported inside ``errors``.

Dependencies: userdir.application.services, userdir.models
System role: Directory query HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from userdir.api.deps.dependencies import get_query_service
from userdir.application.services.query_service import QueryService
from userdir.models.query import QueryRequest

from .query_error_handling import handle_query_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["query"])


@router.post("")
@handle_query_errors
async def execute_query(
    request: QueryRequest,
    query_service: QueryService = Depends(get_query_service),
) -> dict[str, Any]:
    """
    Execute a query document.

    Args:
        request: Query text, variables and optional operation name
        query_service: Injected QueryService

    Returns:
        dict: Envelope with ``data`` on success or ``data: null`` plus ``errors``
    """
    envelope = await query_service.execute(request)
    return envelope.model_dump(mode="json", exclude_unset=True)
