"""
Agent routing: pick one of five advisor agents for a query by keyword matching.

Keyword sets are checked in fixed priority order (crop, soil, scheme,
productivity); the first set with a substring hit wins, otherwise "general".
A query mentioning both "soil" and "seed" therefore routes to crop_advisor.
"""

import logging
from typing import Literal

logger = logging.getLogger(__name__)

AgentType = Literal["crop_advisor", "soil_expert", "scheme_finder", "productivity_advisor", "general"]

GENERAL_AGENT: AgentType = "general"

# Priority order matters: earlier entries win ties.
AGENT_KEYWORDS: tuple[tuple[AgentType, tuple[str, ...]], ...] = (
    ("crop_advisor", ("crop", "cultivation", "plant", "grow", "harvest", "variety", "seed", "npk")),
    (
        "soil_expert",
        (
            "soil",
            "ph",
            "nitrogen",
            "phosphorus",
            "potassium",
            "nutrient",
            "deficiency",
            "organic matter",
            "fertilizer",
        ),
    ),
    (
        "scheme_finder",
        (
            "scheme",
            "pm-kisan",
            "pmfby",
            "insurance",
            "subsidy",
            "government",
            "kcc",
            "credit",
            "health card",
        ),
    ),
    (
        "productivity_advisor",
        ("productivity", "yield", "ipm", "pest", "irrigation", "drip", "rotation", "precision"),
    ),
)

AGENT_CATEGORIES: dict[str, str] = {
    "crop_advisor": "crop",
    "soil_expert": "soil",
    "scheme_finder": "scheme",
    "productivity_advisor": "productivity",
    "general": "general",
}

AGENT_NAMES: dict[str, str] = {
    "crop_advisor": "Crop Advisor Agent",
    "soil_expert": "Soil Expert Agent",
    "scheme_finder": "Scheme Finder Agent",
    "productivity_advisor": "Productivity Advisor Agent",
    "general": "General Agriculture Agent",
}


def classify_query(query: str) -> AgentType:
    """Return the first agent whose keyword set has a substring in the lower-cased query."""
    text = query.lower()
    for agent, keywords in AGENT_KEYWORDS:
        for word in keywords:
            if word in text:
                logger.info("[agent_router:classify_query] agent=%s matched=%r", agent, word)
                return agent
    logger.info("[agent_router:classify_query] agent=%s (no keyword matched)", GENERAL_AGENT)
    return GENERAL_AGENT


def agent_category(agent: str) -> str:
    """Knowledge-base category for an agent; unknown agents map to general."""
    return AGENT_CATEGORIES.get(agent, "general")


def agent_display_name(agent: str) -> str:
    return AGENT_NAMES.get(agent, AGENT_NAMES[GENERAL_AGENT])


def describe_agents() -> list[dict]:
    """Agents in routing priority order, general last."""
    keyword_map = dict(AGENT_KEYWORDS)
    order = [agent for agent, _ in AGENT_KEYWORDS] + [GENERAL_AGENT]
    return [
        {
            "agent_type": agent,
            "name": AGENT_NAMES[agent],
            "category": AGENT_CATEGORIES[agent],
            "keywords": list(keyword_map.get(agent, ())),
        }
        for agent in order
    ]
