"""Domain shapes and API contracts."""

from userdir.models.user import Address, Phone, SearchKey, User
from userdir.models.query import ErrorEntry, QueryEnvelope, QueryRequest

__all__ = [
    "Address",
    "ErrorEntry",
    "Phone",
    "QueryEnvelope",
    "QueryRequest",
    "SearchKey",
    "User",
]
