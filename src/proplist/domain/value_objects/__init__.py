"""Domain value objects."""

from proplist.domain.value_objects.json_map import JsonMap

__all__ = [
    "JsonMap",
]
