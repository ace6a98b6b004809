"""Schemas for knowledge-base browsing and the query log."""

from pydantic import BaseModel, Field


class KnowledgeDocument(BaseModel):
    """One row of the knowledge_base table."""

    id: int
    title: str
    content: str
    category: str = Field(..., description="One of crop, soil, scheme, productivity, general.")
    crop_name: str | None = None
    season: str | None = None
    region: str | None = None
    tags: list[str] = Field(default_factory=list)


class KnowledgeListResponse(BaseModel):
    """Response for GET /knowledge."""

    documents: list[KnowledgeDocument]
    count: int
    category_counts: dict[str, int] = Field(
        default_factory=dict, description="Documents per category across the whole knowledge base (ignores filters)."
    )


class QueryLogRecord(BaseModel):
    """One row of the queries table."""

    id: int
    query_text: str
    crop_name: str | None = None
    season: str | None = None
    region: str | None = None
    agent_type: str
    response: str
    confidence_score: float
    processing_time_ms: int
    created_at: str


class QueryLogResponse(BaseModel):
    """Response for GET /queries."""

    queries: list[QueryLogRecord]
