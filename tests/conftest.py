"""
Pytest fixtures for the Focusify tests.
"""

from pathlib import Path

import pytest

from app import create_app
from utils.config import Config
from utils.template_engine import TemplateEngine


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def engine() -> TemplateEngine:
    """Bundled template set, compiled once."""
    return TemplateEngine()


@pytest.fixture
def make_bundle(tmp_path: Path):
    """
    Write a template bundle from a {relative_path: source} mapping.

    layouts/ and pages/ always exist, even when empty.
    """
    def _make(files: dict) -> Path:
        root = tmp_path / "bundle"
        (root / "layouts").mkdir(parents=True, exist_ok=True)
        (root / "pages").mkdir(parents=True, exist_ok=True)
        for rel, source in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        return root

    return _make


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def desktop_client(engine):
    app = create_app(Config(port="3000", is_desktop_app=True), engine)
    return app.test_client()


@pytest.fixture
def web_client(engine):
    app = create_app(Config(port="3000", is_desktop_app=False), engine)
    return app.test_client()
