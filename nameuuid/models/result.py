"""Result model for exception-free UUID generation.

UUIDResult carries either a generated identifier or the ValidationError
that prevented it, never both.
"""

import uuid
from dataclasses import dataclass
from typing import Any

from nameuuid.exceptions import ValidationError


@dataclass(frozen=True)
class UUIDResult:
  """Outcome of try_make_uuid_v5()."""

  status: str  # "success" or "error"
  value: uuid.UUID | None = None
  error: ValidationError | None = None

  def __post_init__(self):
    """Reject results whose status, value and error disagree."""
    if (self.value is None) == (self.error is None):
      raise ValueError("UUIDResult requires exactly one of value or error")
    expected = "success" if self.value is not None else "error"
    if self.status != expected:
      raise ValueError(
        f"UUIDResult status {self.status!r} does not match outcome {expected!r}"
      )

  @classmethod
  def success(cls, value: uuid.UUID) -> "UUIDResult":
    return cls(status="success", value=value)

  @classmethod
  def failure(cls, error: ValidationError) -> "UUIDResult":
    return cls(status="error", error=error)

  def is_success(self) -> bool:
    return self.status == "success"

  def unwrap(self) -> uuid.UUID:
    """
    Return the generated UUID.

    Raises:
        ValidationError: The error stored in a failed result
    """
    if self.error is not None:
      raise self.error
    return self.value

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary for JSON serialization."""
    return {
      "status": self.status,
      "value": str(self.value) if self.value is not None else None,
      "error": self.error.to_dict() if self.error is not None else None,
    }
