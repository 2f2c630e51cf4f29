# This module implements create, read, update, and delete semantics over one collection store.
# It exists so both services share identical identifier, merge, and filter rules.
# Operations return outcome values instead of raising, and the HTTP layer maps them to status codes.
# New ids come from the current collection length, so ids can repeat after a deletion.

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.resources.definitions import ResourceDefinition
from src.resources.store import CollectionStore, Record

logger = logging.getLogger(__name__)

_RECORD_ID_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Ok:
    record: Record | None = None


@dataclass(frozen=True)
class NotFound:
    record_id: int | None


@dataclass(frozen=True)
class ValidationFailure:
    message: str


Outcome = Ok | NotFound | ValidationFailure


class ResourceManager:
    """Resource operations for one definition, backed by an owned store."""

    def __init__(
        self,
        definition: ResourceDefinition,
        *,
        store: CollectionStore | None = None,
    ) -> None:
        self.definition = definition
        self.store = store if store is not None else CollectionStore(definition.seed)

    def list_records(self, filters: Mapping[str, Any] | None = None) -> list[Record]:
        logger.info("Fetching all %s", self.definition.name)
        requested = filters or {}
        records = self.store.all()
        for list_filter in self.definition.filters:
            value = requested.get(list_filter.param)
            if value is None:
                continue
            records = [record for record in records if list_filter.matches(record, value)]
        return records

    def get_record(self, record_id: int | None) -> Ok | NotFound:
        logger.info("Fetching %s %s", self.definition.singular, record_id)
        if record_id is None:
            return NotFound(record_id=None)
        record = self.store.find_by_id(record_id)
        if record is None:
            return NotFound(record_id=record_id)
        return Ok(record=record)

    def create_record(self, payload: Mapping[str, Any]) -> Ok | ValidationFailure:
        logger.info("Creating new %s", self.definition.singular)
        required = [rule.name for rule in self.definition.fields if rule.required]
        if any(not payload.get(name) for name in required):
            return ValidationFailure(message=self.definition.required_message)

        record: Record = {"id": len(self.store) + 1}
        for rule in self.definition.fields:
            value = payload.get(rule.name)
            record[rule.name] = rule.convert(value) if value else rule.default
        self.store.append(record)
        return Ok(record=record)

    def update_record(self, record_id: int | None, payload: Mapping[str, Any]) -> Ok | NotFound:
        logger.info("Updating %s %s", self.definition.singular, record_id)
        if record_id is None:
            return NotFound(record_id=None)
        existing = self.store.find_by_id(record_id)
        if existing is None:
            return NotFound(record_id=record_id)

        merged = dict(existing)
        for rule in self.definition.fields:
            value = payload.get(rule.name)
            if value is None:
                continue
            if not value and not rule.merge_falsy:
                continue
            merged[rule.name] = rule.convert(value)
        self.store.replace_at(record_id, merged)
        return Ok(record=merged)

    def delete_record(self, record_id: int | None) -> Ok | NotFound:
        logger.info("Deleting %s %s", self.definition.singular, record_id)
        if record_id is None or not self.store.remove_by_id(record_id):
            return NotFound(record_id=record_id)
        return Ok()

    def distinct_values(self, field_name: str) -> list[Any]:
        values: list[Any] = []
        for record in self.store.all():
            value = record.get(field_name)
            if value not in values:
                values.append(value)
        return values


def parse_record_id(raw: str) -> int | None:
    """Parse a path identifier; anything that is not a plain ASCII integer yields None."""

    candidate = raw.strip()
    if not _RECORD_ID_RE.fullmatch(candidate):
        return None
    return int(candidate)
