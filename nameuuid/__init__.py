"""Deterministic, name-based version 5 UUIDs."""

from nameuuid.exceptions import ValidationCause, ValidationError
from nameuuid.models.result import UUIDResult
from nameuuid.utils.uuid import (
  NAMESPACE_DNS,
  NAMESPACE_OID,
  NAMESPACE_URL,
  NAMESPACE_X500,
  NAMEUUID_NAMESPACE,
  generate_deterministic_uuid,
  make_uuid_v5,
  try_make_uuid_v5,
)

__all__ = [
  "NAMESPACE_DNS",
  "NAMESPACE_OID",
  "NAMESPACE_URL",
  "NAMESPACE_X500",
  "NAMEUUID_NAMESPACE",
  "UUIDResult",
  "ValidationCause",
  "ValidationError",
  "generate_deterministic_uuid",
  "make_uuid_v5",
  "try_make_uuid_v5",
]
