"""Shared pytest fixtures for guides_api tests."""

from pathlib import Path
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from guides_api.app import create_app
from guides_api.config import Settings

EXPECTED_GUIDES: list[dict[str, Any]] = [
    {"id": 1, "title": "Getting Started with SvelteKit"},
    {"id": 2, "title": "Building a SvelteKit Application"},
    {"id": 3, "title": "Deploying SvelteKit Apps"},
    {"id": 4, "title": "SvelteKit Routing"},
    {"id": 5, "title": "State Management in SvelteKit"},
]


@pytest.fixture
def create_route_file(tmp_path: Path):
    """Create a route.py file with given content.

    Returns a callable taking the file content, an optional parent
    directory (defaults to tmp_path) and an optional subdirectory such as
    "guides" or "(docs)/guides/[guide_id]". Returns the created file path.
    """

    def _create(
        content: str,
        parent_dir: Path | None = None,
        subdir: str = "",
    ) -> Path:
        target_dir = (parent_dir or tmp_path) / subdir
        target_dir.mkdir(parents=True, exist_ok=True)

        route_file = target_dir / "route.py"
        route_file.write_text(content)
        return route_file

    return _create


@pytest.fixture
def create_route_tree(tmp_path: Path, create_route_file):
    """Create a directory tree of route.py files from a dict.

    Keys are directory names; values are either route.py content (str) or
    a nested dict of subdirectories. Returns the root of the tree.

    Example:
        {
            "guides": "async def get(): return {'guides': []}",
            "docs": {"[page]": "def get(page: str): return {'page': page}"},
        }
    """

    def _create(spec: dict[str, Any], parent_dir: Path | None = None) -> Path:
        base = parent_dir or tmp_path

        for key, value in spec.items():
            if isinstance(value, str):
                create_route_file(content=value, parent_dir=base, subdir=key)
            elif isinstance(value, dict):
                subdir = base / key
                subdir.mkdir(parents=True, exist_ok=True)
                _create(value, parent_dir=subdir)
            else:
                msg = f"Invalid spec value type: {type(value)}"
                raise TypeError(msg)

        return base

    return _create


@pytest.fixture
def expected_guides() -> list[dict[str, Any]]:
    """The guide listing every caller should receive."""
    return [dict(guide) for guide in EXPECTED_GUIDES]


@pytest.fixture
def app() -> FastAPI:
    """The guides application with default settings."""
    return create_app(Settings())


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path: Path) -> Path:
    """Clear GUIDES_API_* variables and run from an empty working directory."""
    for name in ("HOST", "PORT", "LOG_LEVEL", "PREFIX", "ROUTES_DIR"):
        # setenv first so teardown also drops values load_dotenv() wrote
        monkeypatch.setenv(f"GUIDES_API_{name}", "")
        monkeypatch.delenv(f"GUIDES_API_{name}")
    monkeypatch.chdir(tmp_path)
    return tmp_path
