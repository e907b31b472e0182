"""Property entity - a single key/value text pair."""

from dataclasses import dataclass


@dataclass
class Property:
    """Property - key identifies the entry, value is mutable in place."""

    key: str
    value: str = ""

    def __str__(self) -> str:
        return f"{self.key}={self.value}"
