"""Setup functions that prepare a collection before a case is measured."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .documents import DocumentGenerator, populate_collection
from .errors import SetupError
from .fields import parse_field_path

logger = logging.getLogger(__name__)

WILDCARD_KEY = "$**"


class CollectionSetup(ABC):
    """Drops and repopulates a collection, then builds the case's indexes.

    Instances are called with the collection under test. Any error reported
    by the store is raised as ``SetupError``; the case is unusable after that.
    """

    kind = "collection"

    def __init__(
        self,
        fields_to_index: list[str],
        generator: DocumentGenerator,
        document_count: int,
    ):
        for path in fields_to_index:
            parse_field_path(path)
        self.fields_to_index = list(fields_to_index)
        self.generator = generator
        self.document_count = document_count

    def __call__(self, collection: Collection) -> None:
        name = getattr(collection, "name", "collection")
        try:
            collection.drop()
            populate_collection(self.generator, collection, self.document_count)
            self.create_indexes(collection)
        except PyMongoError as e:
            raise SetupError(f"{self.kind} setup failed on {name}: {e}") from e
        logger.info(
            "Prepared %s with %d documents (%s index)",
            name,
            self.document_count,
            self.kind,
        )

    @abstractmethod
    def create_indexes(self, collection: Collection) -> None:
        """Create the indexes this setup is responsible for."""

    def describe(self) -> dict[str, Any]:
        """Return a JSON-serializable summary of this setup."""
        return {
            "kind": self.kind,
            "fields_to_index": list(self.fields_to_index),
            "generator": self.generator.describe(),
            "document_count": self.document_count,
        }


class TargetedIndexSetup(CollectionSetup):
    """One sparse ascending index per field, used as the comparison baseline."""

    kind = "targeted"

    def create_indexes(self, collection: Collection) -> None:
        for name in self.fields_to_index:
            collection.create_index([(name, ASCENDING)], sparse=True)


class WildcardIndexSetup(CollectionSetup):
    """A single ``$**`` index, projected onto ``fields_to_index`` when given."""

    kind = "wildcard"

    def create_indexes(self, collection: Collection) -> None:
        options: dict[str, Any] = {}
        if self.fields_to_index:
            options["wildcardProjection"] = {name: 1 for name in self.fields_to_index}
        collection.create_index([(WILDCARD_KEY, ASCENDING)], **options)
