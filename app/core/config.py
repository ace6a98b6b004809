"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root (directory that contains app/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent

# SQLite file holding the knowledge_base and queries tables
KNOWLEDGE_DB_PATH: str = (
    os.getenv("KNOWLEDGE_DB_PATH", "").strip()
    or str(PROJECT_ROOT / "data" / "agri_advisor.db")
)

# Retrieval cap (documents per request)
RETRIEVAL_LIMIT: int = 5

# Generation parameters
LLM_TEMPERATURE: float = 0.7
LLM_MAX_TOKENS: int = 1000
LLM_API_TIMEOUT: float = 60.0

# OpenAI (used when OPENAI_API_KEY is set)
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "").strip()
OPENAI_LLM_MODEL: str = (
    os.getenv("OPENAI_LLM_MODEL", "gpt-4o-mini").strip() or "gpt-4o-mini"
)

# Any OpenAI-compatible chat completions endpoint (used when OPENAI_API_KEY is not set)
LLM_API_URL: str = (
    os.getenv("LLM_API_URL", "https://router.huggingface.co/v1/chat/completions").strip()
    or "https://router.huggingface.co/v1/chat/completions"
)
LLM_API_KEY: str = os.getenv("LLM_API_KEY", "").strip()
LLM_MODEL: str = (
    os.getenv("LLM_MODEL", "meta-llama/Llama-3.2-3B-Instruct").strip()
    or "meta-llama/Llama-3.2-3B-Instruct"
)

# CORS: comma-separated origins; "*" allows any origin
CORS_ORIGINS: list[str] = [
    o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
] or ["*"]
