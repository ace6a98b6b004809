"""
Advisor LLM: one chat-completion call per request.

When OPENAI_API_KEY is set, uses the OpenAI SDK; otherwise posts to the
OpenAI-compatible endpoint at LLM_API_URL with LLM_API_KEY. The provider is
picked from config only. Any failure raises GenerationError; nothing is retried.
"""

import logging

import httpx
from openai import OpenAI, OpenAIError

from app.core.config import (
    LLM_API_KEY,
    LLM_API_TIMEOUT,
    LLM_API_URL,
    LLM_MAX_TOKENS,
    LLM_MODEL,
    LLM_TEMPERATURE,
    OPENAI_API_KEY,
    OPENAI_LLM_MODEL,
)
from app.core.errors import GenerationError

logger = logging.getLogger(__name__)


def _messages(system_prompt: str, user_message: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_message},
    ]


def _call_openai(system_prompt: str, user_message: str) -> str:
    """Call OpenAI chat completions. Returns generated text."""
    client = OpenAI(api_key=OPENAI_API_KEY, timeout=LLM_API_TIMEOUT, max_retries=0)
    try:
        response = client.chat.completions.create(
            model=OPENAI_LLM_MODEL,
            messages=_messages(system_prompt, user_message),
            temperature=LLM_TEMPERATURE,
            max_tokens=LLM_MAX_TOKENS,
        )
    except OpenAIError as e:
        logger.error("[llm:openai] request failed: %s", e)
        status = getattr(e, "status_code", None)
        raise GenerationError(f"AI API error: {status or e}", status_code=status) from e
    msg = response.choices[0].message if response.choices else None
    out = (getattr(msg, "content", None) or "").strip()
    if not out:
        raise GenerationError("AI API returned an empty response")
    logger.info("[llm:openai] OUT response_len=%d", len(out))
    return out


def _call_chat_endpoint(system_prompt: str, user_message: str) -> str:
    """Call an OpenAI-compatible chat completions URL. Returns generated text."""
    if not LLM_API_KEY:
        raise GenerationError("LLM_API_KEY not configured")
    headers = {"Authorization": f"Bearer {LLM_API_KEY}", "Content-Type": "application/json"}
    payload = {
        "model": LLM_MODEL,
        "messages": _messages(system_prompt, user_message),
        "temperature": LLM_TEMPERATURE,
        "max_tokens": LLM_MAX_TOKENS,
    }
    try:
        with httpx.Client(timeout=LLM_API_TIMEOUT) as client:
            response = client.post(LLM_API_URL, json=payload, headers=headers)
    except httpx.HTTPError as e:
        logger.error("[llm:http] request failed: %s", e)
        raise GenerationError(f"AI API request failed: {e}") from e
    if not response.is_success:
        logger.error("[llm:http] AI API error %s: %s", response.status_code, response.text[:200])
        raise GenerationError(f"AI API error: {response.status_code}", status_code=response.status_code)
    try:
        data = response.json()
        out = (data["choices"][0]["message"]["content"] or "").strip()
    except (ValueError, KeyError, IndexError, TypeError) as e:
        raise GenerationError("AI API returned a malformed response") from e
    if not out:
        raise GenerationError("AI API returned an empty response")
    logger.info("[llm:http] OUT response_len=%d", len(out))
    return out


def generate_response(system_prompt: str, user_message: str) -> str:
    """Send system + user message to the configured provider and return the model's text."""
    logger.info(
        "[llm] IN  system_len=%d user_len=%d provider=%s",
        len(system_prompt), len(user_message), "openai" if OPENAI_API_KEY else "http",
    )
    logger.debug("[llm] user_sample=%r", user_message[:500])
    if OPENAI_API_KEY:
        return _call_openai(system_prompt, user_message)
    return _call_chat_endpoint(system_prompt, user_message)
