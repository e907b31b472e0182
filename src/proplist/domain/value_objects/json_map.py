"""Flat string-keyed JSON object used as the export format for properties."""

import json

from proplist.domain.exceptions import InvalidPropertyKey


class JsonMap(dict[str, str]):
    """JSON object with text field names; ``put`` overwrites (last write wins)."""

    def put(self, key: str, value: str) -> None:
        if not isinstance(key, str):
            raise InvalidPropertyKey(f"JSON field name must be text, got {key!r}")
        self[key] = value

    def dumps(self, indent: int | None = None) -> str:
        """Render as JSON text, fields in insertion order."""
        return json.dumps(self, indent=indent, ensure_ascii=False)
