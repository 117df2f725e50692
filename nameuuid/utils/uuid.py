"""
UUID Utilities for nameuuid

UUID5 provides deterministic UUIDs based on namespace + name hashing.
The same namespace and name always produce the same identifier, in any
process and at any time.

Generation is split into four steps, each usable on its own:
serialize the namespace, hash it with the name, stamp the version and
variant bits, and rebuild a UUID from the first 16 bytes.
"""

import hashlib
import uuid

from nameuuid.config import env
from nameuuid.exceptions import ValidationCause, ValidationError
from nameuuid.logger import logger
from nameuuid.models.result import UUIDResult

# RFC 4122 predefined namespaces
NAMESPACE_DNS = uuid.UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_URL = uuid.UUID("6ba7b811-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_OID = uuid.UUID("6ba7b812-9dad-11d1-80b4-00c04fd430c8")
NAMESPACE_X500 = uuid.UUID("6ba7b814-9dad-11d1-80b4-00c04fd430c8")

# Custom namespace for deterministic ID generation inside this project
# This ensures our UUIDs don't collide with other systems using UUID5
NAMEUUID_NAMESPACE = env.NAMESPACE

SHA_1 = "sha1"
UUID_BYTE_LENGTH = 16

_BYTES_LIKE = (bytes, bytearray, memoryview)


def uuid_to_bytes(identifier: uuid.UUID) -> bytes:
  """
  Serialize a UUID into 16 big-endian bytes.

  Bytes 0-7 hold the most significant 64 bits, bytes 8-15 the least
  significant 64 bits.
  """
  msb = identifier.int >> 64
  lsb = identifier.int & 0xFFFFFFFFFFFFFFFF
  return msb.to_bytes(8, "big") + lsb.to_bytes(8, "big")


def uuid_from_bytes(data: bytes | bytearray) -> uuid.UUID:
  """
  Build a UUID from the first 16 bytes of a byte sequence.

  Args:
      data: At least 16 bytes; anything beyond byte 15 is ignored

  Returns:
      UUID whose most significant half is bytes 0-7 (big-endian)
  """
  if len(data) < UUID_BYTE_LENGTH:
    raise ValueError(f"Expected at least {UUID_BYTE_LENGTH} bytes, got {len(data)}")

  msb = int.from_bytes(data[0:8], "big")
  lsb = int.from_bytes(data[8:16], "big")
  return uuid.UUID(int=(msb << 64) | lsb)


def compute_digest(
  namespace_bytes: bytes, name: bytes | bytearray | memoryview
) -> bytes:
  """
  Compute SHA-1 over the namespace bytes followed by the name bytes.

  Args:
      namespace_bytes: Serialized namespace (16 bytes)
      name: Name bytes, may be empty

  Returns:
      20-byte SHA-1 digest

  Raises:
      ValidationError: If SHA-1 is not available in this runtime
  """
  try:
    # usedforsecurity=False keeps SHA-1 available on FIPS-restricted builds
    hasher = hashlib.new(SHA_1, usedforsecurity=False)
  except ValueError as e:
    logger.error(f"Hash algorithm {SHA_1} unavailable: {e}", exc_info=True)
    raise ValidationError(
      "Invalid parameters", cause=ValidationCause.ALGORITHM_UNAVAILABLE
    ) from e

  if isinstance(name, memoryview) and not name.contiguous:
    name = name.tobytes()

  hasher.update(namespace_bytes)
  hasher.update(name)
  return hasher.digest()


def set_version_and_variant(digest: bytes) -> bytearray:
  """
  Copy the first 16 digest bytes and stamp the UUID metadata on them.

  1. clear the version nibble and set it to 5
  2. clear the variant bits and set them to the IETF layout (10)

  The digest itself is left untouched.
  """
  uuid_bytes = bytearray(digest[:UUID_BYTE_LENGTH])
  uuid_bytes[6] &= 0x0F
  uuid_bytes[6] |= 0x50
  uuid_bytes[8] &= 0x3F
  uuid_bytes[8] |= 0x80
  return uuid_bytes


def _namespace_bytes(namespace) -> bytes | None:
  if isinstance(namespace, uuid.UUID):
    return uuid_to_bytes(namespace)
  if isinstance(namespace, _BYTES_LIKE):
    raw = bytes(namespace)
    if len(raw) == UUID_BYTE_LENGTH:
      return raw
  return None


def make_uuid_v5(
  namespace: uuid.UUID | bytes | bytearray | memoryview,
  name: bytes | bytearray | memoryview,
) -> uuid.UUID:
  """
  Create a version 5 UUID from a namespace and a name.

  Args:
      namespace: Namespace UUID, or its 16-byte big-endian form
      name: Name bytes (an empty sequence is valid)

  Returns:
      uuid.UUID: Deterministic UUID5 (always the same for same inputs)

  Raises:
      ValidationError: Invalid parameters were provided, or SHA-1 is
          unavailable (see ValidationError.cause)
  """
  namespace_bytes = _namespace_bytes(namespace)
  if namespace_bytes is None or not isinstance(name, _BYTES_LIKE):
    logger.warning(
      f"Rejected UUID5 parameters: namespace={type(namespace).__name__}, "
      f"name={type(name).__name__}"
    )
    raise ValidationError("Invalid parameters", cause=ValidationCause.INVALID_INPUT)

  digest = compute_digest(namespace_bytes, name)
  result = uuid_from_bytes(set_version_and_variant(digest))
  logger.debug(f"Generated UUID5 {result}")
  return result


def try_make_uuid_v5(
  namespace: uuid.UUID | bytes | bytearray | memoryview,
  name: bytes | bytearray | memoryview,
) -> UUIDResult:
  """
  Exception-free variant of make_uuid_v5().

  Returns:
      UUIDResult holding either the UUID or the ValidationError
  """
  try:
    return UUIDResult.success(make_uuid_v5(namespace, name))
  except ValidationError as e:
    return UUIDResult.failure(e)


def generate_deterministic_uuid(content: str, namespace: str | None = None) -> str:
  """
  Generate a deterministic UUID string based on content using UUID5.

  Uses SHA-1 hashing of the project namespace UUID + content to produce the
  same UUID every time for the same input, regardless of process or worker.

  Args:
      content: String to generate ID from
      namespace: Optional label to prevent collisions between entity types

  Returns:
      str: Deterministic UUID5 string (36 chars with hyphens)
  """
  # e.g. "user:42" vs "doc:42"
  full_content = f"{namespace}:{content}" if namespace else content
  return str(
    make_uuid_v5(NAMEUUID_NAMESPACE, full_content.encode(env.NAME_ENCODING))
  )
