"""
Environment configuration for nameuuid.

Values are read once at import time. Override them by exporting the
matching variable before the package is imported.
"""

import os
import uuid

# Logging level for the shared nameuuid logger (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.getenv("NAMEUUID_LOG_LEVEL", "WARNING").upper()

# Project namespace for generate_deterministic_uuid().
# Never rotate this value in a deployed system; every derived ID depends on it.
NAMESPACE = uuid.UUID(
  os.getenv("NAMEUUID_NAMESPACE", "3f1c9b2e-7d4a-4e6b-9a2f-5c8d1e0b7a64")
)

# Encoding applied to string content before hashing
NAME_ENCODING = os.getenv("NAMEUUID_NAME_ENCODING", "utf-8")
