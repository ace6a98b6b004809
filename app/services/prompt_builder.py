"""Context and prompt assembly for the advisor agents."""

from typing import Any

BASE_SYSTEM_PROMPT = (
    "You are an expert AI Agriculture Advisor. Provide accurate, practical, and helpful advice "
    "to farmers based on the knowledge base provided. Be concise but comprehensive."
)

AGENT_SPECIALISATIONS: dict[str, str] = {
    "crop_advisor": (
        "You specialize in crop cultivation practices, including planting, growing, harvesting, "
        "and crop management. Focus on crop-specific NPK requirements, growing conditions, "
        "varieties, and best practices."
    ),
    "soil_expert": (
        "You specialize in soil health, nutrient management, pH levels, and fertilizer "
        "recommendations. Help farmers understand soil deficiencies and how to improve soil quality."
    ),
    "scheme_finder": (
        "You specialize in government agricultural schemes, subsidies, insurance, and farmer "
        "welfare programs. Explain eligibility, benefits, registration process, and documentation."
    ),
    "productivity_advisor": (
        "You specialize in farming productivity, including IPM (Integrated Pest Management), "
        "irrigation techniques, crop rotation, and modern agricultural technologies."
    ),
    "general": "You provide general agricultural advice covering all aspects of farming.",
}


def system_prompt_for(agent: str) -> str:
    specialisation = AGENT_SPECIALISATIONS.get(agent, AGENT_SPECIALISATIONS["general"])
    return f"{BASE_SYSTEM_PROMPT} {specialisation}"


def build_context(
    documents: list[dict[str, Any]],
    query: str,
    crop: str | None = None,
    season: str | None = None,
    region: str | None = None,
) -> str:
    """
    Render the request attributes and retrieved documents as a markdown block.
    Documents appear in retrieval order; unset attributes are left out.
    """
    parts = ["# Agriculture Knowledge Base Context\n\n"]
    if crop:
        parts.append(f"Crop: {crop}\n")
    if season:
        parts.append(f"Season: {season}\n")
    if region:
        parts.append(f"Region: {region}\n")
    parts.append(f"\nUser Query: {query}\n\n")
    parts.append("## Relevant Information from Knowledge Base:\n\n")

    for i, doc in enumerate(documents, start=1):
        parts.append(f"### Document {i}: {doc.get('title', '')}\n")
        parts.append(f"Category: {doc.get('category', '')}\n")
        if doc.get("crop_name"):
            parts.append(f"Crop: {doc['crop_name']}\n")
        if doc.get("season"):
            parts.append(f"Season: {doc['season']}\n")
        if doc.get("region"):
            parts.append(f"Region: {doc['region']}\n")
        parts.append(f"Content: {doc.get('content', '')}\n\n")
    return "".join(parts)


def build_user_message(context: str, query: str) -> str:
    return (
        f"{context}\n\nBased on the above knowledge base information, "
        f"please answer the following query:\n{query}"
    )
