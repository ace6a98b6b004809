"""
API handlers: call services, map results/errors to HTTP.

Responsibility: Bridge HTTP types and services. Marshalling and exception-to-HTTP mapping.
Lives in the API layer so services stay free of FastAPI/HTTP types.
"""

import logging

from fastapi import HTTPException

from app.core.errors import GenerationError, InvalidQueryError
from app.schemas.advisor import AdvisorRequest, AdvisorResponse
from app.services.advisor_service import advise

logger = logging.getLogger(__name__)


def handle_advise(body: AdvisorRequest) -> AdvisorResponse:
    """
    Run the advisor pipeline and map errors: invalid query → 400,
    generation failure or anything unexpected → 500.
    """
    try:
        result = advise(body.query, crop=body.crop, season=body.season, region=body.region)
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except GenerationError as e:
        logger.error("Generation failed: %s", e.message)
        raise HTTPException(status_code=500, detail=e.message) from e
    except Exception as e:
        logger.exception("Advisor failed")
        raise HTTPException(status_code=500, detail=str(e) or "Internal server error") from e

    return AdvisorResponse(
        agent=result.agent,
        response=result.response,
        confidence=result.confidence,
        documents_retrieved=result.documents_retrieved,
    )
