"""
Lightweight SQLite DB for the knowledge corpus and the query log.

Creates data/agri_advisor.db (or KNOWLEDGE_DB_PATH). Tables:
  knowledge_base (id, title, content, category, crop_name, season, region, tags, created_at)
  queries (id, query_text, crop_name, season, region, agent_type, response,
           confidence_score, processing_time_ms, created_at)

knowledge_base is read-only for the advisor; rows come from scripts/seed_knowledge_db.py.
queries is append-only.
"""

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from app.core.config import KNOWLEDGE_DB_PATH

logger = logging.getLogger(__name__)

_DB_PATH = Path(KNOWLEDGE_DB_PATH)
_KNOWLEDGE_TABLE = "knowledge_base"
_QUERIES_TABLE = "queries"

CATEGORIES: tuple[str, ...] = ("crop", "soil", "scheme", "productivity", "general")

# Columns that may carry an "equals one of, or is NULL" filter
_FILTER_COLUMNS = frozenset({"crop_name", "season", "region"})


def _get_conn() -> sqlite3.Connection:
    _DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(_DB_PATH))
    conn.row_factory = sqlite3.Row
    return conn


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _row_to_document(row: sqlite3.Row) -> dict[str, Any]:
    doc = dict(row)
    try:
        doc["tags"] = json.loads(doc.get("tags") or "[]")
    except json.JSONDecodeError:
        doc["tags"] = []
    return doc


def init_db() -> None:
    """Create both tables if they do not exist."""
    conn = _get_conn()
    try:
        conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {_KNOWLEDGE_TABLE} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                content TEXT NOT NULL,
                category TEXT NOT NULL,
                crop_name TEXT,
                season TEXT,
                region TEXT,
                tags TEXT NOT NULL DEFAULT '[]',
                created_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {_QUERIES_TABLE} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                query_text TEXT NOT NULL,
                crop_name TEXT,
                season TEXT,
                region TEXT,
                agent_type TEXT NOT NULL,
                response TEXT NOT NULL,
                confidence_score REAL NOT NULL,
                processing_time_ms INTEGER NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        conn.commit()
    finally:
        conn.close()


def insert_document(
    title: str,
    content: str,
    category: str,
    crop_name: str | None = None,
    season: str | None = None,
    region: str | None = None,
    tags: list[str] | None = None,
) -> int:
    """Insert one knowledge document and return its id. Category must be one of CATEGORIES."""
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category {category!r}; expected one of {', '.join(CATEGORIES)}")
    init_db()
    conn = _get_conn()
    try:
        cur = conn.execute(
            f"""
            INSERT INTO {_KNOWLEDGE_TABLE}
                (title, content, category, crop_name, season, region, tags, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (title, content, category, crop_name, season, region, json.dumps(tags or [], ensure_ascii=False), _now()),
        )
        conn.commit()
        logger.info("[knowledge_db] added document id=%s category=%s title=%r", cur.lastrowid, category, title)
        return cur.lastrowid
    finally:
        conn.close()


def search_documents(
    category: str | None = None,
    filters: dict[str, list[str]] | None = None,
    limit: int = 5,
) -> list[dict[str, Any]]:
    """
    Return up to `limit` documents, oldest first.

    category: exact match when given; None means any category.
    filters: column -> accepted values. A row passes a column filter when the
    column equals one of the values or is NULL (missing attribute = wildcard).
    """
    clauses: list[str] = []
    params: list[Any] = []
    if category is not None:
        clauses.append("category = ?")
        params.append(category)
    for column, values in (filters or {}).items():
        if column not in _FILTER_COLUMNS:
            raise ValueError(f"Cannot filter on column {column!r}")
        if not values:
            continue
        placeholders = ", ".join("?" for _ in values)
        clauses.append(f"({column} IN ({placeholders}) OR {column} IS NULL)")
        params.extend(values)
    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    sql = f"SELECT * FROM {_KNOWLEDGE_TABLE} {where} ORDER BY id ASC LIMIT ?"
    params.append(limit)

    init_db()
    conn = _get_conn()
    try:
        rows = conn.execute(sql, params).fetchall()
    finally:
        conn.close()
    return [_row_to_document(r) for r in rows]


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_documents(category: str | None = None, search: str | None = None) -> list[dict[str, Any]]:
    """All documents ordered by category (knowledge browser). Search is case-insensitive over title, content, tags."""
    clauses: list[str] = []
    params: list[Any] = []
    if category:
        clauses.append("category = ?")
        params.append(category)
    if search:
        pattern = f"%{_escape_like(search.lower())}%"
        clauses.append(
            "(lower(title) LIKE ? ESCAPE '\\' OR lower(content) LIKE ? ESCAPE '\\' OR lower(tags) LIKE ? ESCAPE '\\')"
        )
        params.extend([pattern, pattern, pattern])
    where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

    init_db()
    conn = _get_conn()
    try:
        rows = conn.execute(
            f"SELECT * FROM {_KNOWLEDGE_TABLE} {where} ORDER BY category ASC, id ASC", params
        ).fetchall()
    finally:
        conn.close()
    return [_row_to_document(r) for r in rows]


def count_by_category() -> dict[str, int]:
    """Document count for every category, zero included."""
    init_db()
    conn = _get_conn()
    try:
        rows = conn.execute(
            f"SELECT category, COUNT(*) AS n FROM {_KNOWLEDGE_TABLE} GROUP BY category"
        ).fetchall()
    finally:
        conn.close()
    counts = dict.fromkeys(CATEGORIES, 0)
    counts.update({r["category"]: r["n"] for r in rows})
    return counts


def clear_documents() -> None:
    """Delete all knowledge rows. Used by the seed script's --reset."""
    init_db()
    conn = _get_conn()
    try:
        conn.execute(f"DELETE FROM {_KNOWLEDGE_TABLE}")
        conn.commit()
        logger.info("[knowledge_db] cleared knowledge_base")
    finally:
        conn.close()


def log_query(
    query_text: str,
    agent_type: str,
    response: str,
    confidence_score: float,
    processing_time_ms: int,
    crop_name: str | None = None,
    season: str | None = None,
    region: str | None = None,
) -> None:
    """Append one query/response record."""
    init_db()
    conn = _get_conn()
    try:
        conn.execute(
            f"""
            INSERT INTO {_QUERIES_TABLE}
                (query_text, crop_name, season, region, agent_type, response,
                 confidence_score, processing_time_ms, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                query_text,
                crop_name,
                season,
                region,
                agent_type,
                response,
                confidence_score,
                processing_time_ms,
                _now(),
            ),
        )
        conn.commit()
        logger.info("[knowledge_db] logged query agent_type=%s confidence=%.1f", agent_type, confidence_score)
    finally:
        conn.close()


def list_queries(limit: int = 20) -> list[dict[str, Any]]:
    """Return the most recent query log rows, newest first."""
    init_db()
    conn = _get_conn()
    try:
        rows = conn.execute(
            f"SELECT * FROM {_QUERIES_TABLE} ORDER BY id DESC LIMIT ?", (limit,)
        ).fetchall()
    finally:
        conn.close()
    return [dict(r) for r in rows]
