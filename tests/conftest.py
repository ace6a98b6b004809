"""Shared fixtures: every test gets its own SQLite file instead of data/agri_advisor.db."""

from pathlib import Path

import pytest

from app.core import knowledge_db


@pytest.fixture(autouse=True)
def kb_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "agri_advisor_test.db"
    monkeypatch.setattr(knowledge_db, "_DB_PATH", path)
    return path


@pytest.fixture
def add_doc():
    """Insert a knowledge document with short defaults; returns its id."""

    def _add(title: str, category: str = "crop", content: str = "", **attrs) -> int:
        return knowledge_db.insert_document(
            title=title,
            content=content or f"Content of {title}.",
            category=category,
            **attrs,
        )

    return _add
