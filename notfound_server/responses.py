#!/usr/bin/env python3
"""
Response descriptors for the not-found page and the health payload.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

from flask import Response

from notfound_server.config import (
    DEFAULT_SERVICE_NAME,
    HEALTH_HEADERS,
    NOT_FOUND_HEADERS,
    REQUEST_ID_RESPONSE_HEADER,
)


@dataclass(frozen=True)
class ResponseDescriptor:
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_response(self) -> Response:
        return Response(self.body, status=self.status, headers=self.headers)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResponseBuilder:
    """Builds responses with a fixed header set per response kind"""

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME):
        self.service_name = service_name

    def not_found(self, html: str, request_id: Optional[str] = None) -> ResponseDescriptor:
        headers = dict(NOT_FOUND_HEADERS)
        if request_id:
            headers[REQUEST_ID_RESPONSE_HEADER] = request_id
        return ResponseDescriptor(status=404, headers=headers, body=html)

    def health(self) -> ResponseDescriptor:
        """Health check response for monitoring systems

        Returns:
            Descriptor with status, ISO timestamp and service name
        """
        payload = {
            "status": "healthy",
            "timestamp": utc_timestamp(),
            "service": self.service_name,
        }
        return ResponseDescriptor(
            status=200,
            headers=dict(HEALTH_HEADERS),
            body=json.dumps(payload),
        )
