"""Load JSON schemas from files or inline text into a SchemaStore."""
import json
import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Any, Optional, Tuple
from urllib.parse import urlsplit
from urllib.request import url2pathname

from referencing import Resource
from referencing.exceptions import NoSuchResource

from json_assert.config import resolve_draft
from json_assert.errors import SchemaNotFound, SchemaParseError
from json_assert.store import SchemaStore

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Resolve schema paths and text to ``(uri, schema)`` pairs registered in ``store``.

    Relative paths are looked up under ``schema_dir`` when one is configured,
    otherwise under the working directory. Schemas without ``$schema`` are
    read as ``draft``, the store's draft unless given.
    """

    def __init__(self, store: SchemaStore, schema_dir: Optional[str] = None, draft: Optional[str] = None):
        self.store = store
        self.schema_dir = schema_dir
        self.draft = draft or store.draft

    def resolve_path(self, path: str) -> Path:
        candidate = Path(path)
        if not candidate.is_absolute() and self.schema_dir:
            candidate = Path(self.schema_dir) / candidate
        return candidate.resolve()

    def load_from_file(self, path: str) -> Tuple[str, Any]:
        """Parse the schema at ``path`` and register it as ``file://<absolute path>``.

        Raises SchemaNotFound before touching the store when the file is missing.
        """
        resolved = self.resolve_path(path)
        if not resolved.is_file():
            raise SchemaNotFound(str(path))

        with open(resolved, encoding="utf-8") as f:
            try:
                schema = json.load(f)
            except ValueError as exc:
                raise SchemaParseError(f"Schema is not valid JSON: {exc}", source=str(resolved)) from exc

        uri = resolved.as_uri()
        self.store.add_schema(uri, schema)
        return uri, schema

    def load_from_string(self, text: str, use_tempfile: bool = False) -> Tuple[str, Any]:
        """Register an inline schema.

        By default the schema is registered in memory under a fresh ``urn:uuid:`` URI.
        With ``use_tempfile`` the text is written to a uniquely named file in the
        system temp directory and loaded from there; that file is left in place.
        """
        if use_tempfile:
            fd, name = tempfile.mkstemp(prefix="json-schema-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            logger.debug("Wrote inline schema to %s", name)
            return self.load_from_file(name)

        try:
            schema = json.loads(text)
        except ValueError as exc:
            raise SchemaParseError(f"Schema is not valid JSON: {exc}", source="<string>") from exc
        uri = uuid.uuid4().urn
        self.store.add_schema(uri, schema)
        return uri, schema

    def retrieve(self, uri: str) -> Resource:
        """Retrieval hook for ``$ref`` targets missing from the store.

        Only ``file://`` URIs are retrieved; they are loaded from disk and
        registered so later lookups hit the store.
        """
        parts = urlsplit(uri)
        if parts.scheme != "file":
            raise NoSuchResource(ref=uri)
        try:
            _, schema = self.load_from_file(url2pathname(parts.path))
        except SchemaNotFound:
            raise NoSuchResource(ref=uri) from None
        logger.debug("Retrieved referenced schema %s", uri)
        _, specification = resolve_draft(self.draft)
        return Resource.from_contents(schema, default_specification=specification)
