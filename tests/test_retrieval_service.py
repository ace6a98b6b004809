"""
Tests for filtered knowledge retrieval and its category-only fallback.

Each test runs against a fresh SQLite file (see conftest.kb_path).
"""

import sqlite3
from unittest.mock import patch

from app.services.retrieval_service import build_filters, retrieve_documents


def _titles(docs: list[dict]) -> list[str]:
    return [d["title"] for d in docs]


class TestBuildFilters:
    """Tests for build_filters()."""

    def test_no_attributes_no_filters(self) -> None:
        assert build_filters() == {}
        assert build_filters("", "", "") == {}

    def test_each_attribute(self) -> None:
        assert build_filters(crop="Wheat", season="Rabi", region="North India") == {
            "crop_name": ["Wheat"],
            "season": ["Rabi"],
            "region": ["North India", "Pan-India"],
        }

    def test_other_crop_and_pan_india_region_mean_no_filter(self) -> None:
        assert build_filters(crop="Other", region="Pan-India") == {}


def test_wheat_rabi_example_filters_by_category_crop_and_season(add_doc) -> None:
    add_doc("Wheat Rabi", crop_name="Wheat", season="Rabi")
    add_doc("Rice Kharif", crop_name="Rice", season="Kharif")
    add_doc("Wheat Kharif", crop_name="Wheat", season="Kharif")
    add_doc("Any crop, any season")
    add_doc("Wheat soil note", category="soil", crop_name="Wheat", season="Rabi")

    docs = retrieve_documents("crop_advisor", crop="Wheat", season="Rabi")

    assert _titles(docs) == ["Wheat Rabi", "Any crop, any season"]
    assert all(d["category"] == "crop" for d in docs)


def test_falls_back_to_category_only_when_filters_match_nothing(add_doc) -> None:
    add_doc("Rice Kharif", crop_name="Rice", season="Kharif")
    add_doc("Wheat Rabi", crop_name="Wheat", season="Rabi")
    add_doc("Soil doc", category="soil")

    docs = retrieve_documents("crop_advisor", crop="Potato", season="Zaid")

    assert _titles(docs) == ["Rice Kharif", "Wheat Rabi"]


def test_region_accepts_pan_india_and_missing_region(add_doc) -> None:
    add_doc("North", region="North India")
    add_doc("South", region="South India")
    add_doc("Everywhere", region="Pan-India")
    add_doc("Unspecified")

    docs = retrieve_documents("crop_advisor", region="North India")

    assert _titles(docs) == ["North", "Everywhere", "Unspecified"]


def test_result_count_capped_at_five(add_doc) -> None:
    for i in range(8):
        add_doc(f"Crop doc {i}")

    docs = retrieve_documents("crop_advisor")

    assert len(docs) == 5
    assert _titles(docs) == [f"Crop doc {i}" for i in range(5)]


def test_fallback_also_capped_at_five(add_doc) -> None:
    for i in range(7):
        add_doc(f"Rice doc {i}", crop_name="Rice")

    docs = retrieve_documents("crop_advisor", crop="Wheat")

    assert len(docs) == 5


def test_general_agent_searches_every_category(add_doc) -> None:
    add_doc("Crop doc", category="crop")
    add_doc("Scheme doc", category="scheme")
    add_doc("General doc", category="general")

    docs = retrieve_documents("general")

    assert _titles(docs) == ["Crop doc", "Scheme doc", "General doc"]


def test_empty_store_returns_empty_list() -> None:
    assert retrieve_documents("soil_expert", crop="Rice") == []


def test_storage_error_degrades_to_empty_list() -> None:
    with patch(
        "app.services.retrieval_service.search_documents",
        side_effect=sqlite3.OperationalError("database is locked"),
    ):
        assert retrieve_documents("crop_advisor", crop="Wheat") == []


def test_tags_are_returned_as_list(add_doc) -> None:
    add_doc("Tagged", tags=["wheat", "npk"])

    docs = retrieve_documents("crop_advisor")

    assert docs[0]["tags"] == ["wheat", "npk"]


def test_general_fallback_stays_in_general_category(add_doc) -> None:
    add_doc("Rice crop doc", category="crop", crop_name="Rice")
    add_doc("Scheme doc", category="scheme", crop_name="Rice")
    add_doc("General weather", category="general", crop_name="Rice")

    docs = retrieve_documents("general", crop="Wheat")

    assert _titles(docs) == ["General weather"]
    assert all(d["category"] == "general" for d in docs)


def test_fallback_storage_error_degrades_to_empty_list() -> None:
    with patch(
        "app.services.retrieval_service.search_documents",
        side_effect=[[], sqlite3.OperationalError("disk I/O error")],
    ) as mock_search:
        assert retrieve_documents("soil_expert", season="Rabi") == []
    assert mock_search.call_count == 2
    assert mock_search.call_args_list[1].kwargs == {"category": "soil", "limit": 5}
