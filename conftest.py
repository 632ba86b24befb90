"""Shared pytest fixtures for the not-found server tests."""

from pathlib import Path

import pytest

from notfound_server.server import create_app

TEMPLATE_HTML = """<!DOCTYPE html>
<html>
<body>
  <h1>Deployment not found</h1>
  <div class="request-id">ID: {{ requestId }}</div>
  <footer>{{ region }}</footer>
</body>
</html>
"""


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text(TEMPLATE_HTML, encoding="utf-8")
    (directory / "styles.css").write_text("body { color: #111; }\n", encoding="utf-8")
    return directory


@pytest.fixture
def app(public_dir: Path, monkeypatch):
    for name in ("TEMPLATE_PATH", "PUBLIC_DIR", "SERVICE_NAME", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    flask_app = create_app(
        template_path=public_dir / "index.html",
        public_dir=public_dir,
    )
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
