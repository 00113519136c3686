"""
Query service.

Resolves a ``{query, variables}`` document onto the directory service and
wraps the outcome in a ``{data, errors}`` envelope.

Only the root field and its argument bindings are read from the document,
e.g. ``searchUsers(firstName: $firstName, lastName: "Victor")``. Field
selections are not interpreted: resolvers always return the full record
shape.

Dependencies: pydantic, userdir.application.services.directory_service
System role: Directory query endpoint orchestration
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from userdir.application.services.directory_service import DirectoryService
from userdir.core.exceptions import InvalidQueryError, RecordNotFoundError
from userdir.models.query import ErrorEntry, QueryEnvelope, QueryRequest
from userdir.models.user import SearchKey
from userdir.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

_STRING = r'"(?:[^"\\]|\\.)*"'
_COMMENT = re.compile(rf"(?P<string>{_STRING})|#[^\n]*")
_ROOT_FIELD = re.compile(
    rf"\{{\s*(?:(?P<alias>\w+)\s*:\s*)?(?P<field>\w+)\s*(?:\((?P<args>(?:{_STRING}|[^()\"])*)\))?"
)
_ARGUMENT = re.compile(
    rf"(?P<name>\w+)\s*:\s*(?P<value>\$\w+|{_STRING}|-?\d+(?:\.\d+)?|true|false|null)"
)

NOT_FOUND = "NOT_FOUND"
BAD_REQUEST = "BAD_REQUEST"
INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class ParsedQuery:
    """Root field of a query document with bound arguments."""

    root_field: str
    response_key: str
    arguments: dict[str, Any] = field(default_factory=dict)


def _strip_comments(query: str) -> str:
    return _COMMENT.sub(lambda m: m.group("string") or "", query)


def parse_document(query: str, variables: dict[str, Any]) -> ParsedQuery:
    """
    Extract the root field and bind its arguments.

    Args:
        query: Query document text
        variables: Values for ``$name`` references

    Returns:
        ParsedQuery: Root field name, response key (alias or field) and arguments

    Raises:
        InvalidQueryError: If no root field can be found
    """
    match = _ROOT_FIELD.search(_strip_comments(query))
    if match is None:
        raise InvalidQueryError("Query document has no root field")

    arguments: dict[str, Any] = {}
    for arg in _ARGUMENT.finditer(match.group("args") or ""):
        raw = arg.group("value")
        if raw.startswith("$"):
            arguments[arg.group("name")] = variables.get(raw[1:])
        else:
            arguments[arg.group("name")] = json.loads(raw)

    return ParsedQuery(
        root_field=match.group("field"),
        response_key=match.group("alias") or match.group("field"),
        arguments=arguments,
    )


def error_envelope(message: str, code: str, path: list[str | int] | None = None) -> QueryEnvelope:
    """Build an error envelope with a single entry and null data."""
    fields: dict[str, Any] = {"message": message, "extensions": {"code": code}}
    if path is not None:
        fields["path"] = path
    return QueryEnvelope(data=None, errors=[ErrorEntry(**fields)])


class QueryService:
    """Query document resolver."""

    def __init__(self, directory: DirectoryService) -> None:
        """
        Initialize query service.

        Args:
            directory: Directory service answering the resolved queries
        """
        self.directory = directory
        self._resolvers: dict[str, Callable[[dict[str, Any]], Awaitable[Any]]] = {
            "searchUsers": self._search_users,
            "userById": self._user_by_id,
        }

    async def execute(self, request: QueryRequest) -> QueryEnvelope:
        """
        Execute a query document.

        Directory errors become envelope entries; anything else propagates.

        Args:
            request: Query text and variables

        Returns:
            QueryEnvelope: ``data`` keyed by the response key, or ``errors``
        """
        try:
            parsed = parse_document(request.query, request.variables or {})
        except InvalidQueryError as e:
            return error_envelope(e.message, BAD_REQUEST)

        log_with_context(
            logger,
            logging.INFO,
            "Executing query",
            field=parsed.root_field,
            operation=request.operation_name,
            variables=request.variables,
        )

        resolver = self._resolvers.get(parsed.root_field)
        if resolver is None:
            return error_envelope(
                f"Unknown root field: {parsed.root_field}", BAD_REQUEST, [parsed.response_key]
            )

        try:
            result = await resolver(parsed.arguments)
        except RecordNotFoundError as e:
            logger.warning("Record not found", extra={"record_id": e.record_id})
            return error_envelope(e.message, NOT_FOUND, [parsed.response_key])
        except InvalidQueryError as e:
            logger.warning("Invalid query arguments", extra={"error": str(e)})
            return error_envelope(e.message, BAD_REQUEST, [parsed.response_key])

        return QueryEnvelope(data={parsed.response_key: result})

    async def _search_users(self, arguments: dict[str, Any]) -> list[dict[str, Any]]:
        try:
            key = SearchKey.model_validate(
                {
                    "firstName": arguments.get("firstName"),
                    "lastName": arguments.get("lastName"),
                    "dateOfBirth": arguments.get("dateOfBirth"),
                }
            )
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise InvalidQueryError(
                f"Invalid searchUsers arguments: {fields}", field="searchUsers"
            ) from e

        users = await self.directory.search(key)
        return [user.model_dump(by_alias=True, mode="json") for user in users]

    async def _user_by_id(self, arguments: dict[str, Any]) -> dict[str, Any]:
        record_id = arguments.get("id")
        if not record_id:
            raise InvalidQueryError("Missing required argument: id", field="userById")

        user = await self.directory.get_by_id(str(record_id))
        return user.model_dump(by_alias=True, mode="json")
