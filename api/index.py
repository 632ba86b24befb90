#!/usr/bin/env python3
"""WSGI entry point for hosted deployments.

Exposes ``app`` for any WSGI host. The template is loaded at import time, so a
missing template stops the worker from booting.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from notfound_server.server import configure_logging, create_app  # noqa: E402

configure_logging()
app = create_app()
