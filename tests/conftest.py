"""Gemensamma fixtures för testerna."""

import copy
import json
import os
import tempfile
from pathlib import Path

import pytest

# Databasen ska aldrig hamna i repots data/-katalog under testkörning
os.environ.setdefault("PORTFOLIO_DATA_DIR", tempfile.mkdtemp(prefix="portfolio-tests-"))

from core.config import settings  # noqa: E402
from core.database import init_db  # noqa: E402
from models.portfolio import PortfolioData  # noqa: E402
from services.storage import StorageResult  # noqa: E402

SAMPLE_DATA = {
    "personal": {
        "name": "Jane Doe",
        "title": "Backend Engineer",
        "description": "Builds things that stay up.",
    },
    "about": {
        "description": ["First paragraph.", "Second paragraph.", "Third paragraph."],
        "stats": [{"value": "5+", "label": "Years"}, {"value": 20, "label": "Projects"}],
    },
    "skills": [
        {"icon": "fab fa-python", "name": "Python", "level": "Expert"},
        {"icon": "fab fa-js", "name": "JavaScript", "level": "Advanced"},
        {"icon": "fas fa-database", "name": "PostgreSQL", "level": "Advanced"},
        {"icon": "fab fa-docker", "name": "Docker", "level": "Intermediate"},
        {"icon": "fab fa-git-alt", "name": "Git", "level": "Advanced"},
    ],
    "experience": [
        {"period": "2022 - Present", "position": "Staff Engineer", "company": "Acme", "description": "Platform work."},
        {"period": "2019 - 2022", "position": "Senior Engineer", "company": "Globex", "description": "Payments."},
        {"period": "2016 - 2019", "position": "Engineer", "company": "Initech", "description": "Reports."},
    ],
    "projects": [
        {
            "icon": "fas fa-rocket",
            "title": "Launcher",
            "description": "Deploy tool.",
            "technologies": ["Python", "Docker"],
            "liveUrl": "https://example.com/launcher",
            "codeUrl": "https://github.com/example/launcher",
        },
        {
            "icon": "fas fa-book",
            "title": "Notes",
            "description": "Note taking.",
            "technologies": ["TypeScript"],
        },
    ],
    "contact": {
        "description": "Say hello.",
        "links": [
            {"url": "mailto:jane@example.com", "icon": "fas fa-envelope", "label": "Email"},
            {"url": "https://github.com/jane", "icon": "fab fa-github", "label": "GitHub"},
        ],
    },
}


class MemoryStore:
    """Lagring i minnet för tester av temahanteringen."""

    def __init__(self, initial=None):
        self.values = dict(initial or {})

    def get(self, key):
        return StorageResult.success(self.values.get(key))

    def set(self, key, value):
        self.values[key] = value
        return StorageResult.success(value)

    def remove(self, key):
        self.values.pop(key, None)
        return StorageResult.success()

    def clear(self):
        self.values.clear()
        return StorageResult.success()


class BrokenStore:
    """Lagring som alltid misslyckas, som en blockerad localStorage."""

    def get(self, key):
        return StorageResult.failure("storage unavailable")

    def set(self, key, value):
        return StorageResult.failure("storage unavailable")

    def remove(self, key):
        return StorageResult.failure("storage unavailable")

    def clear(self):
        return StorageResult.failure("storage unavailable")


@pytest.fixture
def sample_data() -> dict:
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def portfolio_data(sample_data) -> PortfolioData:
    return PortfolioData.model_validate(sample_data)


@pytest.fixture
def portfolio_file(tmp_path: Path, sample_data) -> Path:
    path = tmp_path / "portfolio.json"
    path.write_text(json.dumps(sample_data), encoding="utf-8")
    return path


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch) -> Path:
    """Egen SQLite-fil per test."""
    monkeypatch.setattr(settings, "data_dir", tmp_path)
    init_db()
    return settings.database_path


@pytest.fixture
def client(db_path, portfolio_file, tmp_path, monkeypatch):
    from fastapi.testclient import TestClient

    from app import app

    monkeypatch.setattr(settings, "portfolio_source", str(portfolio_file))
    monkeypatch.setattr(settings, "cv_source", str(tmp_path / "missing-cv.pdf"))
    with TestClient(app) as test_client:
        yield test_client
