"""
Advisor: route the query to an agent, retrieve knowledge, generate and log the answer.

Responsibility: The single request pipeline
  classify → retrieve → build context → generate → score → log.
Retrieval and logging degrade gracefully; a generation failure is fatal.
Called by the API; no HTTP here.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any

from app.agent.llm import generate_response
from app.core.errors import InvalidQueryError
from app.core.knowledge_db import log_query
from app.services.agent_router import agent_display_name, classify_query
from app.services.prompt_builder import build_context, build_user_message, system_prompt_for
from app.services.retrieval_service import retrieve_documents

logger = logging.getLogger(__name__)


@dataclass
class AdvisorResult:
    """Outcome of one advisor request."""

    agent: str
    agent_type: str
    response: str
    confidence: float
    documents_retrieved: int


def calculate_confidence(doc_count: int) -> float:
    """Step function over retrieved document count: 3+ → 0.9, 2 → 0.8, 1 → 0.7, none → 0.5."""
    if doc_count >= 3:
        return 0.9
    if doc_count >= 2:
        return 0.8
    if doc_count >= 1:
        return 0.7
    return 0.5


def _clean_optional(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def validate_query(query: Any) -> str:
    """Return the stripped query or raise InvalidQueryError."""
    if not isinstance(query, str) or not query.strip():
        raise InvalidQueryError()
    return query.strip()


def _log_best_effort(**record: Any) -> None:
    try:
        log_query(**record)
    except Exception:
        logger.exception("[advisor] failed to log query; response unaffected")


def advise(
    query: Any,
    crop: Any = None,
    season: Any = None,
    region: Any = None,
) -> AdvisorResult:
    """
    Answer one farming question.

    Raises InvalidQueryError before any retrieval when the query is unusable, and
    GenerationError when the LLM call fails.
    """
    query = validate_query(query)
    crop, season, region = _clean_optional(crop), _clean_optional(season), _clean_optional(region)
    started = time.perf_counter()
    logger.info("[advisor] IN  query=%r crop=%s season=%s region=%s", query, crop, season, region)

    agent = classify_query(query)
    logger.info("[advisor] selected agent=%s", agent)

    documents = retrieve_documents(agent, crop=crop, season=season, region=region)
    logger.info("[advisor] retrieved %d documents", len(documents))

    context = build_context(documents, query, crop=crop, season=season, region=region)
    answer = generate_response(system_prompt_for(agent), build_user_message(context, query))

    confidence = calculate_confidence(len(documents))
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    _log_best_effort(
        query_text=query,
        crop_name=crop,
        season=season,
        region=region,
        agent_type=agent,
        response=answer,
        confidence_score=confidence,
        processing_time_ms=elapsed_ms,
    )

    logger.info("[advisor] OUT agent=%s confidence=%.1f docs=%d elapsed_ms=%d", agent, confidence, len(documents), elapsed_ms)
    return AdvisorResult(
        agent=agent_display_name(agent),
        agent_type=agent,
        response=answer,
        confidence=confidence,
        documents_retrieved=len(documents),
    )
