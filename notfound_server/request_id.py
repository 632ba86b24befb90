#!/usr/bin/env python3
"""
Request trace identifiers for correlating not-found hits across logs.
"""

import secrets
import time
from typing import Mapping

from notfound_server.config import (
    FALLBACK_ID_ALPHABET,
    FALLBACK_ID_PREFIX,
    FALLBACK_ID_TOKEN_LENGTH,
    REQUEST_ID_HEADERS,
)


class RequestIdExtractor:
    """Extracts a request ID from tracing headers or generates a fallback"""

    @classmethod
    def extract(cls, headers: Mapping[str, str]) -> str:
        """Return the first non-empty tracing header value

        Args:
            headers: Request headers. Werkzeug ``Headers`` are matched
                case-insensitively; plain dicts should use lowercase keys.

        Returns:
            The propagated request ID, or a generated ``unknown-...`` ID
        """
        for header in REQUEST_ID_HEADERS:
            value = headers.get(header)
            if value:
                return value
        return cls.generate_fallback_id()

    @staticmethod
    def generate_fallback_id() -> str:
        timestamp = int(time.time() * 1000)
        token = "".join(
            secrets.choice(FALLBACK_ID_ALPHABET) for _ in range(FALLBACK_ID_TOKEN_LENGTH)
        )
        return f"{FALLBACK_ID_PREFIX}-{timestamp}-{token}"
