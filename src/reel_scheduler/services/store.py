"""In-memory ordered collection of tracked items."""

from dataclasses import fields, replace
from datetime import UTC, datetime
from typing import Any

from reel_scheduler.domain.models import CollectionSnapshot, TrackedItem
from reel_scheduler.logging import get_logger
from reel_scheduler.services.queries import next_id

logger = get_logger(__name__)

_UPDATABLE_FIELDS = {f.name for f in fields(TrackedItem)} - {"id"}


class ItemValidationError(Exception):
    """Raised when an item fails validation before reaching the store."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


class ItemNotFoundError(Exception):
    """Raised when no item has the requested id."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"Video not found: {item_id}")


class ItemStore:
    """Single source of truth for the session's items.

    Mutated only from the coordinating event loop, so no locking. Items are
    kept in insertion order; ids are unique and never change on edit.
    """

    def __init__(self, items: list[TrackedItem] | None = None) -> None:
        self._items: list[TrackedItem] = []
        if items:
            self.replace_all(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def items(self) -> list[TrackedItem]:
        """Return a shallow copy of the ordered item list."""
        return list(self._items)

    def get(self, item_id: int) -> TrackedItem:
        for item in self._items:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(item_id)

    def next_id(self) -> int:
        return next_id(self._items)

    def add(self, item: TrackedItem) -> TrackedItem:
        """Validate and append an item under a freshly assigned id."""
        errors = item.validate()
        if errors:
            raise ItemValidationError(errors)

        new_item = TrackedItem.from_dict(
            {**item.to_dict(), "id": self.next_id(), "name": item.name.strip()}
        )
        self._items.append(new_item)
        logger.debug("item_added", item_id=new_item.id, name=new_item.name)
        return new_item

    def update(self, item_id: int, changes: dict[str, Any]) -> TrackedItem:
        """Shallow-merge field changes into an existing item.

        Raises:
            ItemNotFoundError: If no item has the id
            ItemValidationError: If the merged item is invalid or a field is unknown
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ItemValidationError([f"Unknown field(s): {', '.join(sorted(unknown))}"])

        current = self.get(item_id)
        # Round-trip through the wire form so raw strings become enum members
        merged = replace(current, **changes).to_dict()
        updated = TrackedItem.from_dict({**merged, "name": str(merged["name"] or "").strip()})
        errors = updated.validate()
        if errors:
            raise ItemValidationError(errors)

        index = self._items.index(current)
        self._items[index] = updated
        logger.debug("item_updated", item_id=item_id, fields=sorted(changes))
        return updated

    def delete(self, item_id: int) -> bool:
        """Remove an item. Returns True if anything was removed."""
        before = len(self._items)
        self._items = [item for item in self._items if item.id != item_id]
        removed = len(self._items) < before
        if removed:
            logger.debug("item_deleted", item_id=item_id)
        return removed

    def duplicate(self, item_id: int) -> TrackedItem:
        copy = self.get(item_id).duplicate(self.next_id())
        self._items.append(copy)
        logger.debug("item_duplicated", source_id=item_id, item_id=copy.id)
        return copy

    def replace_all(self, items: list[TrackedItem]) -> None:
        """Replace the whole collection, keeping order.

        Items without a positive id are given fresh ones after the existing
        maximum.

        Raises:
            ItemValidationError: If two items share an id
        """
        seen: set[int] = set()
        duplicates: set[int] = set()
        for item in items:
            if item.id > 0:
                if item.id in seen:
                    duplicates.add(item.id)
                seen.add(item.id)
        if duplicates:
            raise ItemValidationError(
                [f"Duplicate id(s): {', '.join(str(i) for i in sorted(duplicates))}"]
            )

        adopted: list[TrackedItem] = []
        next_free = max(seen, default=0) + 1
        for item in items:
            if item.id > 0:
                adopted.append(item)
            else:
                adopted.append(replace(item, id=next_free))
                next_free += 1
        self._items = adopted

    def clear(self) -> None:
        self._items = []

    def snapshot(self, version: str) -> CollectionSnapshot:
        return CollectionSnapshot(
            items=self.items(),
            version=version,
            timestamp=datetime.now(UTC),
        )
