"""nameuuid data models."""

from nameuuid.models.result import UUIDResult

__all__ = [
  "UUIDResult",
]
