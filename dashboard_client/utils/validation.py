"""
utils/validation.py
--------------------

Checks applied to a call before any network activity.
"""

from __future__ import annotations

import json
from typing import Any

from dashboard_client.logging_config import logger

ALLOWED_METHODS = frozenset({"get", "put", "post", "delete"})


def is_valid_method(method: Any) -> bool:
    """Return ``True`` if ``method`` is one of get/put/post/delete.

    The comparison is case-insensitive.  Anything else, including
    non-string values, is rejected without raising.
    """
    if isinstance(method, str) and method.lower() in ALLOWED_METHODS:
        return True
    logger.warning(json.dumps({"event": "invalid_method", "method": repr(method)}))
    return False
