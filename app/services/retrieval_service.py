"""
Retrieval: category + attribute filtered lookup in the knowledge base, with fallback.

Responsibility: Turn an agent and optional crop/season/region into a store query,
return at most RETRIEVAL_LIMIT documents. Retrieval errors never fail the request.
"""

import logging
from typing import Any

from app.core.config import RETRIEVAL_LIMIT
from app.core.knowledge_db import search_documents
from app.services.agent_router import agent_category

logger = logging.getLogger(__name__)

# Form values meaning "no preference"
ANY_CROP = "Other"
ANY_REGION = "Pan-India"


def build_filters(
    crop: str | None = None,
    season: str | None = None,
    region: str | None = None,
) -> dict[str, list[str]]:
    """
    Column filters for search_documents. Each accepts the given value or NULL.
    Region also accepts Pan-India documents, which apply everywhere.
    """
    filters: dict[str, list[str]] = {}
    if crop and crop != ANY_CROP:
        filters["crop_name"] = [crop]
    if season:
        filters["season"] = [season]
    if region and region != ANY_REGION:
        filters["region"] = [region, ANY_REGION]
    return filters


def retrieve_documents(
    agent: str,
    crop: str | None = None,
    season: str | None = None,
    region: str | None = None,
    limit: int = RETRIEVAL_LIMIT,
) -> list[dict[str, Any]]:
    """
    Pipeline: filtered query (category + attributes) → if empty, category-only query.

    The general agent searches every category first; its fallback is limited to
    category "general". Any storage error yields [].
    """
    category = agent_category(agent)
    category_filter = None if category == "general" else category
    filters = build_filters(crop, season, region)
    logger.info(
        "[retrieval:retrieve_documents] IN  agent=%s category=%s filters=%s limit=%d",
        agent, category, filters, limit,
    )
    try:
        docs = search_documents(category=category_filter, filters=filters, limit=limit)
        if not docs and filters:
            logger.info("[retrieval:retrieve_documents] no filtered match; falling back to category=%s", category)
            docs = search_documents(category=category, limit=limit)
    except Exception as e:
        logger.warning("[retrieval:retrieve_documents] retrieval failed, continuing without documents: %s", e)
        return []
    docs = docs[:limit]
    logger.info(
        "[retrieval:retrieve_documents] OUT docs=%d titles=%s",
        len(docs), [d.get("title") for d in docs],
    )
    return docs
