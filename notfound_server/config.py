#!/usr/bin/env python3
"""
Configuration constants for the 404 Deployment Not Found service.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Default values
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_SERVICE_NAME = "404-deployment-not-found"
DEFAULT_PUBLIC_DIR = PROJECT_ROOT / "public"
DEFAULT_TEMPLATE_PATH = DEFAULT_PUBLIC_DIR / "index.html"
DEFAULT_CORS_ORIGINS = "*"
DEFAULT_LOG_LEVEL = "INFO"

# Template cache key for the not-found page
NOT_FOUND_TEMPLATE = "404"

# Tracing headers, checked in priority order
REQUEST_ID_HEADERS = ("x-request-id", "x-trace-id", "x-correlation-id")
REQUEST_ID_RESPONSE_HEADER = "X-Request-Id"
FALLBACK_ID_PREFIX = "unknown"
FALLBACK_ID_TOKEN_LENGTH = 13
FALLBACK_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

# The catch-all route answers every method with the not-found page
ALL_METHODS = [
    "GET",
    "HEAD",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "OPTIONS",
    "TRACE",
    "CONNECT",
]

NOT_FOUND_HEADERS = {
    "Content-Type": "text/html; charset=utf-8",
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}
HEALTH_HEADERS = {"Content-Type": "application/json"}

# Error messages (user-friendly, no internal details)
ERROR_MESSAGES = {
    "internal_error": "Internal server error",
    "unexpected": "An unexpected error occurred",
    "template_missing": "Template file not found",
    "template_unreadable": "Template file could not be read",
}

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
