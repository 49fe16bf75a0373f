"""URI-addressable schema registry.

Schemas registered here can reference each other with ``$ref``. The registry
outlives a single assertion on purpose; the pytest plugin resets the
process-wide instance before every test.
"""
import logging
from typing import Any, Callable, Optional

from referencing import Registry, Resource

from json_assert.config import resolve_draft

logger = logging.getLogger(__name__)


class SchemaStore:
    def __init__(self, draft: str = "draft7"):
        self.draft = draft
        self._schemas = {}

    def add_schema(self, uri: str, schema: Any) -> None:
        """Register ``schema`` under ``uri``, replacing any earlier registration."""
        if uri in self._schemas:
            logger.debug("Replacing schema %s", uri)
        else:
            logger.debug("Registering schema %s", uri)
        self._schemas[uri] = schema

    def get_schema(self, uri: str) -> Any:
        return self._schemas[uri]

    def uris(self) -> list:
        return list(self._schemas)

    def __contains__(self, uri) -> bool:
        return uri in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def registry(
        self,
        retrieve: Optional[Callable[[str], Resource]] = None,
        draft: Optional[str] = None,
    ) -> Registry:
        """Build a ``referencing.Registry`` over every registered schema.

        Schemas without ``$schema`` are read as ``draft`` (the store's own draft by
        default). URIs that are not registered are handed to ``retrieve`` when given.
        """
        _, specification = resolve_draft(draft or self.draft)
        registry = Registry(retrieve=retrieve) if retrieve is not None else Registry()
        resources = [
            (uri, Resource.from_contents(schema, default_specification=specification))
            for uri, schema in self._schemas.items()
        ]
        return registry.with_resources(resources).crawl()


_store: Optional[SchemaStore] = None


def ensure_store(draft: str = "draft7") -> SchemaStore:
    """Return the process-wide store, creating it for ``draft`` on first use."""
    global _store
    if _store is None:
        _store = SchemaStore(draft=draft)
    return _store


def reset_store(draft: str = "draft7") -> SchemaStore:
    """Replace the process-wide store with an empty one and return it."""
    global _store
    logger.debug("Resetting process-wide schema store")
    _store = SchemaStore(draft=draft)
    return _store
