"""PropertyList - insertion-ordered properties with keyed lookup and upsert."""

import logging
from collections.abc import Iterable, Iterator, Mapping

from proplist.domain.entities.property import Property
from proplist.domain.value_objects import JsonMap

logger = logging.getLogger(__name__)


class PropertyList:
    """Ordered sequence of Property entries.

    Keys are not required to be unique: entries appended directly may repeat a
    key. ``get_value`` resolves duplicates to the first entry, ``to_json`` to
    the last one. Only ``set_property`` avoids creating duplicates.

    A single positional argument that is not a Property is read as an
    iterable of entries, so ``PropertyList("ab")`` iterates the string.
    """

    def __init__(self, *items: Property | Iterable[Property]) -> None:
        # PropertyList(), PropertyList([p1, p2]) or PropertyList(p1, p2)
        if len(items) == 1 and not isinstance(items[0], Property):
            self._items: list[Property] = list(items[0])
        else:
            self._items = list(items)  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "PropertyList":
        """Build a list from a mapping, keeping its iteration order."""
        return cls(Property(key, value) for key, value in mapping.items())

    # --- sequence surface ---

    def append(self, item: Property) -> None:
        self._items.append(item)

    def extend(self, items: Iterable[Property]) -> None:
        self._items.extend(items)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int | slice) -> "Property | PropertyList":
        if isinstance(index, slice):
            return PropertyList(self._items[index])
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"PropertyList({self._items!r})"

    # --- keyed access ---

    def keys(self) -> list[str]:
        """Keys in order, duplicates included."""
        return [p.key for p in self._items]

    def get_value(self, property_name: str) -> str | None:
        """Return the value of the first entry with this key, or None."""
        for prop in self._items:
            if prop.key == property_name:
                return prop.value
        return None

    def set_property(self, key: str, value: str) -> None:
        """Update the first entry with this key in place, or append a new one."""
        for prop in self._items:
            if prop.key == key:
                prop.value = value
                logger.debug("Updated property %r", key)
                return
        self._items.append(Property(key, value))
        logger.debug("Appended property %r at position %d", key, len(self._items) - 1)

    def to_json(self) -> JsonMap:
        """Export as a flat JSON object; later duplicate keys win."""
        json_map = JsonMap()
        for prop in self._items:
            json_map.put(prop.key, prop.value)
        return json_map
