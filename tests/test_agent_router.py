"""
Unit tests for keyword-based agent routing.
"""

import pytest

from app.services.agent_router import (
    agent_category,
    agent_display_name,
    classify_query,
    describe_agents,
)


class TestClassifyQuery:
    """Tests for classify_query()."""

    @pytest.mark.parametrize(
        "query, expected",
        [
            ("When should I harvest sugarcane?", "crop_advisor"),
            ("What NPK ratio suits wheat in Rabi?", "crop_advisor"),
            ("How much fertilizer per acre?", "soil_expert"),
            ("What is the PM-KISAN scheme and how can I enroll?", "scheme_finder"),
            ("Is there insurance under PMFBY?", "scheme_finder"),
            ("Explain the benefits of drip irrigation for cotton farming", "productivity_advisor"),
            ("How do I control whitefly with IPM?", "productivity_advisor"),
            ("How is the weather today?", "general"),
        ],
    )
    def test_single_category_queries(self, query: str, expected: str) -> None:
        assert classify_query(query) == expected

    def test_is_case_insensitive(self) -> None:
        assert classify_query("SOIL TESTING") == "soil_expert"
        assert classify_query("Best Seed For Maize") == "crop_advisor"

    def test_crop_wins_over_soil(self) -> None:
        # "plants" contains "plant", checked before "nitrogen" / "deficiency"
        assert classify_query("How do I identify nitrogen deficiency in wheat plants?") == "crop_advisor"

    def test_soil_wins_over_scheme(self) -> None:
        assert classify_query("Is there a subsidy for soil testing?") == "soil_expert"

    def test_scheme_wins_over_productivity(self) -> None:
        assert classify_query("Is there a subsidy for drip systems?") == "scheme_finder"

    def test_matches_substrings_not_words(self) -> None:
        # "phone" contains "ph", a soil keyword
        assert classify_query("What is the phone number for the KCC helpline?") == "soil_expert"

    def test_multi_word_keywords(self) -> None:
        assert classify_query("How do I raise organic matter?") == "soil_expert"
        assert classify_query("Where is my health card?") == "scheme_finder"

    def test_empty_string_is_general(self) -> None:
        assert classify_query("") == "general"


class TestAgentMetadata:
    """Tests for agent → category / display name mapping."""

    def test_categories(self) -> None:
        assert agent_category("crop_advisor") == "crop"
        assert agent_category("soil_expert") == "soil"
        assert agent_category("scheme_finder") == "scheme"
        assert agent_category("productivity_advisor") == "productivity"
        assert agent_category("general") == "general"
        assert agent_category("unknown") == "general"

    def test_display_names(self) -> None:
        assert agent_display_name("crop_advisor") == "Crop Advisor Agent"
        assert agent_display_name("productivity_advisor") == "Productivity Advisor Agent"
        assert agent_display_name("unknown") == "General Agriculture Agent"

    def test_describe_agents_in_priority_order(self) -> None:
        agents = describe_agents()
        assert [a["agent_type"] for a in agents] == [
            "crop_advisor",
            "soil_expert",
            "scheme_finder",
            "productivity_advisor",
            "general",
        ]
        assert agents[-1]["keywords"] == []
        assert "npk" in agents[0]["keywords"]
