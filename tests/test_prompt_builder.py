"""
Unit tests for context and prompt assembly.
"""

from app.services.prompt_builder import (
    BASE_SYSTEM_PROMPT,
    build_context,
    build_user_message,
    system_prompt_for,
)


class TestBuildContext:
    """Tests for build_context()."""

    def test_full_context_layout(self) -> None:
        docs = [
            {
                "title": "Wheat Nutrients",
                "category": "crop",
                "crop_name": "Wheat",
                "season": "Rabi",
                "region": None,
                "content": "Apply 120:60:40.",
            },
            {"title": "Seed", "category": "crop", "content": "Use certified seed."},
        ]
        context = build_context(docs, "What NPK ratio suits wheat?", crop="Wheat", season="Rabi")
        assert context == (
            "# Agriculture Knowledge Base Context\n\n"
            "Crop: Wheat\n"
            "Season: Rabi\n"
            "\nUser Query: What NPK ratio suits wheat?\n\n"
            "## Relevant Information from Knowledge Base:\n\n"
            "### Document 1: Wheat Nutrients\n"
            "Category: crop\n"
            "Crop: Wheat\n"
            "Season: Rabi\n"
            "Content: Apply 120:60:40.\n\n"
            "### Document 2: Seed\n"
            "Category: crop\n"
            "Content: Use certified seed.\n\n"
        )

    def test_no_documents_no_attributes(self) -> None:
        assert build_context([], "hello") == (
            "# Agriculture Knowledge Base Context\n\n"
            "\nUser Query: hello\n\n"
            "## Relevant Information from Knowledge Base:\n\n"
        )

    def test_region_header(self) -> None:
        assert "Region: South India\n" in build_context([], "q", region="South India")


class TestPrompts:
    """Tests for system_prompt_for() and build_user_message()."""

    def test_each_agent_extends_base_prompt(self) -> None:
        for agent in ("crop_advisor", "soil_expert", "scheme_finder", "productivity_advisor", "general"):
            assert system_prompt_for(agent).startswith(BASE_SYSTEM_PROMPT + " ")
        assert "soil health" in system_prompt_for("soil_expert")
        assert "government agricultural schemes" in system_prompt_for("scheme_finder")

    def test_unknown_agent_gets_general_prompt(self) -> None:
        assert system_prompt_for("weather_bot") == system_prompt_for("general")

    def test_user_message_appends_query(self) -> None:
        msg = build_user_message("CTX", "Why?")
        assert msg == (
            "CTX\n\nBased on the above knowledge base information, "
            "please answer the following query:\nWhy?"
        )
