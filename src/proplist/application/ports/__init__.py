"""Application ports - capabilities implemented by domain types."""

from proplist.application.ports.json_aware import JsonAware

__all__ = ["JsonAware"]
