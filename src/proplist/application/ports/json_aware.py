"""JSON-aware port - types that can export themselves as a JSON value."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class JsonAware(Protocol):
    """Anything convertible to a generic JSON value."""

    def to_json(self) -> Any: ...
