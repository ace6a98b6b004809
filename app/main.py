# Run from project root: uvicorn app.main:app --reload

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import router
from app.core.config import CORS_ORIGINS
from app.core.errors import InvalidQueryError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


app = FastAPI(title="Agriculture Advisor Backend")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Every HTTP error body is {"error": message}."""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


def _validation_message(exc: RequestValidationError) -> str:
    for err in exc.errors():
        loc = tuple(err.get("loc") or ())
        if loc and loc[0] == "body" and (len(loc) == 1 or "query" in loc or err.get("type") == "json_invalid"):
            return InvalidQueryError().message
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in (first.get("loc") or ())[1:]) or "request"
    return f"Invalid {field}: {first.get('msg', 'validation error')}"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed input is a 400, not FastAPI's default 422."""
    message = _validation_message(exc)
    logger.info("[api] rejected request %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


if __name__ == "__main__":
    print("Agriculture advisor booting...")
