"""proplist - ordered key/value properties with keyed lookup and JSON export."""

from proplist.domain.entities import Property, PropertyList

__version__ = "0.1.0"

__all__ = ["Property", "PropertyList", "__version__"]
