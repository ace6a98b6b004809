# Run from project root: streamlit run app/ui.py
# UI talks to backend API (POST /advise, GET /knowledge, GET /queries).

import os

import requests
import streamlit as st

# Backend config
API_BASE = os.environ.get("API_BASE", "http://localhost:8000")

CROPS = ["Rice", "Wheat", "Cotton", "Tomato", "Sugarcane", "Maize", "Potato", "Other"]
SEASONS = ["Kharif", "Rabi", "Zaid", "Year-round"]
REGIONS = ["North India", "South India", "East India", "West India", "Central India", "Pan-India"]
CATEGORIES = {"All Categories": "all", "Crop Info": "crop", "Soil Info": "soil", "Govt Schemes": "scheme", "Productivity": "productivity"}

# Sample queries, one or more per agent
TEST_QUERIES = [
    {"query": "What is the best NPK ratio for rice cultivation in monsoon season?", "crop": "Rice", "season": "Kharif", "region": "Pan-India", "label": "Crop Guidance"},
    {"query": "How do I identify nitrogen deficiency in wheat plants?", "crop": "Wheat", "label": "Soil Health"},
    {"query": "What is the PM-KISAN scheme and how can I enroll?", "label": "Government Schemes"},
    {"query": "Explain the benefits of drip irrigation for cotton farming", "crop": "Cotton", "label": "Productivity"},
    {"query": "What are the symptoms of phosphorus deficiency in soil?", "label": "Soil Health"},
    {"query": "When should I plant tomatoes and what temperature do they need?", "crop": "Tomato", "season": "Rabi", "label": "Crop Guidance"},
    {"query": "How can I improve soil organic matter content?", "label": "Soil Health"},
    {"query": "What is the Soil Health Card scheme?", "label": "Government Schemes"},
    {"query": "What are the principles of crop rotation for sustainable farming?", "label": "Productivity"},
    {"query": "How do I control bollworm pests in cotton using IPM?", "crop": "Cotton", "label": "Productivity"},
]


def _ask(payload: dict) -> dict | None:
    """POST /advise; show errors inline and return the JSON body on success."""
    try:
        r = requests.post(f"{API_BASE}/advise", json=payload, timeout=90)
    except requests.RequestException as e:
        st.error(f"Connection failed: {e}")
        return None
    if not r.ok:
        try:
            msg = r.json().get("error") or r.text[:200]
        except ValueError:
            msg = r.text[:200]
        st.error(f"Error: {r.status_code} — {msg}")
        return None
    return r.json()


def _show_answer(data: dict) -> None:
    col1, col2, col3 = st.columns(3)
    col1.metric("Agent", data.get("agent", ""))
    col2.metric("Confidence", f"{data.get('confidence', 0):.0%}")
    col3.metric("Documents", data.get("documentsRetrieved", 0))
    st.markdown(data.get("response", ""))


st.title("AI Agriculture Advisor")

ask_tab, kb_tab, test_tab, history_tab = st.tabs(["Ask", "Knowledge Base", "Test Queries", "History"])

with ask_tab:
    with st.form("ask_form"):
        query = st.text_area("Your question", placeholder="e.g. What NPK ratio suits wheat in Rabi?")
        c1, c2, c3 = st.columns(3)
        crop = c1.selectbox("Crop", [""] + CROPS, format_func=lambda v: v or "Any")
        season = c2.selectbox("Season", [""] + SEASONS, format_func=lambda v: v or "Any")
        region = c3.selectbox("Region", [""] + REGIONS, format_func=lambda v: v or "Any")
        submitted = st.form_submit_button("Get advice")
    if submitted:
        if not query.strip():
            st.warning("Please enter a query")
        else:
            with st.spinner("Thinking..."):
                data = _ask({"query": query.strip(), "crop": crop or None, "season": season or None, "region": region or None})
            if data:
                _show_answer(data)

with kb_tab:
    c1, c2 = st.columns([3, 1])
    search = c1.text_input("Search knowledge base", key="kb_search")
    category_label = c2.selectbox("Category", list(CATEGORIES), key="kb_category")
    try:
        r = requests.get(
            f"{API_BASE}/knowledge",
            params={"category": CATEGORIES[category_label], "search": search},
            timeout=10,
        )
        if r.ok:
            data = r.json()
            counts = data.get("category_counts") or {}
            stat_cols = st.columns(4)
            for col, (label, key) in zip(
                stat_cols,
                [("Crop Guides", "crop"), ("Soil Info", "soil"), ("Schemes", "scheme"), ("Tips", "productivity")],
            ):
                col.metric(label, counts.get(key, 0))
            docs = data.get("documents") or []
            st.caption(f"{len(docs)} documents")
            for doc in docs:
                with st.expander(f"[{doc.get('category')}] {doc.get('title')}"):
                    st.write(doc.get("content", ""))
                    attrs = [v for v in (doc.get("crop_name"), doc.get("season"), doc.get("region")) if v]
                    if attrs:
                        st.caption(" · ".join(attrs))
                    if doc.get("tags"):
                        st.caption("Tags: " + ", ".join(doc["tags"]))
        else:
            st.error("Failed to load knowledge base")
    except requests.RequestException:
        st.caption("Backend not reachable — start the API first.")

with test_tab:
    st.caption("Each sample query demonstrates routing to a specific agent.")
    for i, tq in enumerate(TEST_QUERIES):
        st.markdown(f"**{tq['label']}** — {tq['query']}")
        attrs = [tq[k] for k in ("crop", "season", "region") if tq.get(k)]
        if attrs:
            st.caption(" · ".join(attrs))
        if st.button("Run test", key=f"test_{i}"):
            with st.spinner("Thinking..."):
                data = _ask({k: tq.get(k) for k in ("query", "crop", "season", "region")})
            if data:
                _show_answer(data)

with history_tab:
    try:
        r = requests.get(f"{API_BASE}/queries", params={"limit": 20}, timeout=10)
        rows = (r.json().get("queries") or []) if r.ok else []
    except requests.RequestException:
        rows = []
        st.caption("Backend not reachable — start the API first.")
    if not rows:
        st.caption("No queries logged yet.")
    for row in rows:
        with st.expander(f"{row.get('created_at', '')[:19]} · {row.get('agent_type')} · {row.get('query_text')}"):
            st.caption(f"Confidence {row.get('confidence_score')} · {row.get('processing_time_ms')} ms")
            st.markdown(row.get("response", ""))
