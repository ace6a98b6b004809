"""
API route aggregator: register endpoints; no logic; only delegate to handlers and services.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from app.api.handlers import handle_advise
from app.core.knowledge_db import CATEGORIES, count_by_category, list_documents, list_queries
from app.schemas.advisor import AdvisorRequest, AdvisorResponse, ErrorResponse
from app.schemas.knowledge import KnowledgeListResponse, QueryLogResponse
from app.services.agent_router import describe_agents

logger = logging.getLogger(__name__)
router = APIRouter()

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


# --- System ---

@router.get("/", tags=["system"])
def root():
    return {"status": "Agriculture advisor backend running"}


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Advisor ---

@router.post(
    "/advise",
    response_model=AdvisorResponse,
    responses=_ERRORS,
    tags=["advisor"],
    summary="Ask the agriculture advisor",
    description="Route the query to an agent, retrieve up to 5 knowledge documents, and generate an answer. 400 on missing/invalid query, 500 on generation failure.",
)
def post_advise(body: AdvisorRequest) -> AdvisorResponse:
    logger.info("[api:post_advise] IN  query=%r crop=%s season=%s region=%s", body.query, body.crop, body.season, body.region)
    out = handle_advise(body)
    logger.info("[api:post_advise] OUT agent=%s docs=%d", out.agent, out.documents_retrieved)
    return out


# Same handler under the function name older clients call
router.add_api_route(
    "/agriculture-advisor",
    post_advise,
    methods=["POST"],
    response_model=AdvisorResponse,
    responses=_ERRORS,
    tags=["advisor"],
    include_in_schema=False,
)


@router.get("/agents", tags=["advisor"], summary="List advisor agents in routing priority order")
def get_agents() -> dict:
    return {"agents": describe_agents()}


# --- Knowledge base ---

@router.get(
    "/knowledge",
    response_model=KnowledgeListResponse,
    responses=_ERRORS,
    tags=["knowledge"],
    summary="Browse the knowledge base",
    description="All documents ordered by category. Optional category filter ('all' for none) and case-insensitive search over title, content, and tags.",
)
def get_knowledge(category: str = "all", search: str = "") -> KnowledgeListResponse:
    category = category.strip().lower()
    if category not in ("", "all") and category not in CATEGORIES:
        raise HTTPException(status_code=400, detail=f"Unknown category {category!r}")
    try:
        docs = list_documents(
            category=None if category in ("", "all") else category,
            search=search.strip() or None,
        )
        counts = count_by_category()
    except Exception as e:
        logger.exception("Failed to load knowledge base")
        raise HTTPException(status_code=500, detail="Failed to load knowledge base") from e
    return KnowledgeListResponse(documents=docs, count=len(docs), category_counts=counts)


@router.get(
    "/queries",
    response_model=QueryLogResponse,
    responses=_ERRORS,
    tags=["knowledge"],
    summary="Recent advisor queries",
    description="Most recent query log rows, newest first.",
)
def get_queries(limit: int = Query(20, ge=1, le=100)) -> QueryLogResponse:
    try:
        rows = list_queries(limit=limit)
    except Exception as e:
        logger.exception("Failed to load query log")
        raise HTTPException(status_code=500, detail="Failed to load query log") from e
    return QueryLogResponse(queries=rows)
