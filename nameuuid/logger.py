"""Shared logger for nameuuid.

Import the module-level ``logger`` rather than creating per-module loggers so
that every component reports under the same name and level.
"""

import logging

from nameuuid.config import env

logger = logging.getLogger("nameuuid")
logger.setLevel(env.LOG_LEVEL)
logger.addHandler(logging.NullHandler())
