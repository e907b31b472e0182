"""Domain entities."""

from proplist.domain.entities.property import Property
from proplist.domain.entities.property_list import PropertyList

__all__ = [
    "Property",
    "PropertyList",
]
