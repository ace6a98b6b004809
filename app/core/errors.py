"""
Application errors for clean API error handling.

InvalidQueryError maps to 400 (bad user input); GenerationError maps to 500
when the text-generation endpoint is misconfigured, unreachable, or answers
with a non-success status.
"""


class InvalidQueryError(ValueError):
    """Raised when the query is missing, not a string, or blank."""

    def __init__(self, message: str = "Query is required and must be a string") -> None:
        self.message = message
        super().__init__(message)


class GenerationError(Exception):
    """Raised when the LLM call fails. Fatal for the request; never retried."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
