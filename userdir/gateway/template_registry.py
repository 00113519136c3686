"""
Query template registry.

Holds named, parameterized query documents for the forwarding gateway.
The mapping is frozen once the registry is built.

Dependencies: pathlib (stdlib)
System role: Client-side source of query bodies
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from userdir.core.exceptions import TemplateNotFoundError

logger = logging.getLogger(__name__)

DOCUMENTS_DIR = Path(__file__).resolve().parent / "documents"
TEMPLATE_SUFFIX = ".graphql"


class QueryTemplateRegistry:
    """
    Immutable registry of named query documents.

    Example:
        >>> registry = QueryTemplateRegistry({"userById": "query { userById(id: $id) { id } }"})
        >>> registry.get("userById")
        'query { userById(id: $id) { id } }'
    """

    def __init__(self, templates: Mapping[str, str]) -> None:
        """
        Initialize registry with a snapshot of the given templates.

        Args:
            templates: Template name to document text
        """
        self._templates: Mapping[str, str] = MappingProxyType(dict(templates))

    @classmethod
    def from_directory(cls, directory: Path) -> "QueryTemplateRegistry":
        """
        Load every ``*.graphql`` file of a directory, keyed by file stem.

        Args:
            directory: Directory holding query documents

        Returns:
            QueryTemplateRegistry: Registry with one template per file

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        if not directory.is_dir():
            raise FileNotFoundError(f"Template directory not found: {directory}")

        templates = {
            path.stem: path.read_text(encoding="utf-8")
            for path in sorted(directory.glob(f"*{TEMPLATE_SUFFIX}"))
        }
        logger.info(
            "Query templates loaded",
            extra={"directory": str(directory), "count": len(templates)},
        )
        return cls(templates)

    @classmethod
    def default(cls) -> "QueryTemplateRegistry":
        """Load the query documents shipped with the package."""
        return cls.from_directory(DOCUMENTS_DIR)

    def get(self, name: str) -> str:
        """
        Get a template by name.

        Args:
            name: Registered template name

        Returns:
            str: Query document text

        Raises:
            TemplateNotFoundError: If no template has this name
        """
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def names(self) -> list[str]:
        """Registered template names, sorted."""
        return sorted(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)
