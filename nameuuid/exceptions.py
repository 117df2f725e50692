"""Exceptions raised by nameuuid."""

from enum import Enum


class ValidationCause(str, Enum):
  """Origin of a ValidationError."""

  INVALID_INPUT = "invalid_input"
  ALGORITHM_UNAVAILABLE = "algorithm_unavailable"


class ValidationError(Exception):
  """
  Raised when a UUID cannot be generated from the given parameters.

  The message is kept generic; ``cause`` tells a caller-fixable input
  problem apart from a runtime that lacks the hash algorithm.
  """

  def __init__(
    self,
    message: str,
    cause: ValidationCause = ValidationCause.INVALID_INPUT,
  ):
    super().__init__(message)
    self.message = message
    self.cause = cause

  def to_dict(self) -> dict[str, str]:
    """Convert to dictionary for JSON serialization."""
    return {"message": self.message, "cause": self.cause.value}
