"""Schemas for the advisor endpoint."""

from pydantic import BaseModel, Field


class AdvisorRequest(BaseModel):
    """Request body for POST /advise. Only query is required; empty filters are ignored."""

    query: str | None = Field(None, description="Farming question, e.g. 'What NPK ratio suits wheat in Rabi?'")
    crop: str | None = Field(None, description="Crop name filter, e.g. Wheat. 'Other' means no crop filter.")
    season: str | None = Field(None, description="Season filter, e.g. Kharif, Rabi, Zaid.")
    region: str | None = Field(None, description="Region filter, e.g. North India. 'Pan-India' means no region filter.")

    model_config = {
        "json_schema_extra": {
            "examples": [{"query": "What NPK ratio suits wheat in Rabi?", "crop": "Wheat", "season": "Rabi"}]
        }
    }


class AdvisorResponse(BaseModel):
    """Response for POST /advise."""

    agent: str = Field(..., description="Display name of the agent that answered, e.g. 'Crop Advisor Agent'.")
    response: str = Field(..., description="Generated answer text.")
    confidence: float = Field(..., ge=0.5, le=0.9, description="Heuristic from retrieved document count (0.5–0.9).")
    documents_retrieved: int = Field(
        ..., alias="documentsRetrieved", ge=0, le=5, description="Number of knowledge documents used as context."
    )

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response."""

    error: str
