"""
Query endpoint contracts.

Request body and response envelope exchanged between the forwarding
gateway and the directory's query endpoint.

Dependencies: pydantic
System role: Wire contract of POST /api/v1/query
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QueryRequest(BaseModel):
    """Query document plus its variable bindings."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., min_length=1, description="Query document text")
    variables: dict[str, Any] | None = Field(default=None, description="Variable bindings")
    operation_name: str | None = Field(
        default=None,
        alias="operationName",
        description="Optional operation name (informational)",
    )


class ErrorEntry(BaseModel):
    """Single failure descriptor inside an envelope."""

    model_config = ConfigDict(extra="allow")

    message: str
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None


class QueryEnvelope(BaseModel):
    """Tagged success/error envelope."""

    model_config = ConfigDict(extra="allow")

    data: Any = None
    errors: list[ErrorEntry] | None = None
