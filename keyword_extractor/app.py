import html
import logging

import streamlit as st

from config import (
    LOG_LEVEL,
    MAX_KEYWORD_COUNT,
    MIN_KEYWORD_COUNT,
    UPLOAD_TYPES,
)
from ingest import IngestError, text_from_upload, text_from_url
from report import keyword_table, table_to_csv, text_stats
from session import ExtractorState

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ───────────────────────────── Setup ───────────────────────────── #
st.set_page_config(page_title="Keyword Extractor", layout="centered")
st.title("Keyword Extractor")
st.caption(
    "Finds the most frequent words in your text (common stop-words ignored) "
    "and marks them with **."
)

if "extractor" not in st.session_state:
    st.session_state.extractor = ExtractorState()
if "input_text" not in st.session_state:
    st.session_state.input_text = st.session_state.extractor.text

state = st.session_state.extractor


# ───────────────────────── Text sources ───────────────────────── #
# Must run before the text area is created: Streamlit refuses writes to a
# widget's key once the widget exists in the current run.
with st.expander("Load text from a file or web page", expanded=False):
    c1, c2 = st.columns(2)

    with c1:
        uploaded = st.file_uploader("Text file", type=UPLOAD_TYPES)
        if st.button("Use file", disabled=uploaded is None):
            st.session_state.input_text = text_from_upload(uploaded.getvalue())
            st.toast(f"Loaded {uploaded.name}", icon="✅")

    with c2:
        url = st.text_input("Web page URL", "")
        if st.button("Fetch page", disabled=not url.strip()):
            try:
                with st.spinner(f"Fetching {url}…"):
                    st.session_state.input_text = text_from_url(url)
                st.toast("Page loaded", icon="✅")
            except IngestError as e:
                st.error(str(e))


# ───────────────────────────── Form ───────────────────────────── #
with st.form("extract"):
    text = st.text_area(
        "Text",
        key="input_text",
        height=200,
        placeholder="Enter or paste your text here...",
    )
    count = st.number_input(
        "Number of keywords:",
        min_value=MIN_KEYWORD_COUNT,
        max_value=MAX_KEYWORD_COUNT,
        value=min(max(state.keyword_count, MIN_KEYWORD_COUNT), MAX_KEYWORD_COUNT),
        step=1,
    )
    submitted = st.form_submit_button("Extract", type="primary")

if submitted:
    state.text = text
    state.keyword_count = int(count)
    state.submit()

if not state.has_result:
    if submitted:
        st.info("Nothing to analyze. Enter or load some text first.")
    st.stop()


# ──────────────────────────── Result ──────────────────────────── #
st.subheader("Highlighted Text")
if st.checkbox("Render as Markdown", value=False):
    st.markdown(state.highlighted)
else:
    st.markdown(
        f"<pre style='white-space: pre-wrap'>{html.escape(state.highlighted)}</pre>",
        unsafe_allow_html=True,
    )

stats = text_stats(state.text, state.frequencies)
m1, m2, m3, m4 = st.columns(4)
m1.metric("Characters", stats["characters"])
m2.metric("Lines", stats["lines"])
m3.metric("Counted words", stats["counted_tokens"])
m4.metric("Distinct words", stats["distinct_terms"])

df = keyword_table(state.frequencies, state.keywords)
df_view = df.assign(share=df["share"].astype(float) * 100)

st.subheader("Keywords")
st.dataframe(
    df_view,
    use_container_width=True,
    hide_index=True,
    column_config={
        "keyword": st.column_config.TextColumn("Keyword"),
        "count": st.column_config.NumberColumn("Count"),
        "share": st.column_config.NumberColumn("Share", format="%.1f%%", help="Of all counted words"),
    },
)

# Export
d1, d2 = st.columns(2)
d1.download_button(
    "Download keywords.csv", data=table_to_csv(df), file_name="keywords.csv", mime="text/csv"
)
d2.download_button(
    "Download highlighted.md", data=state.highlighted, file_name="highlighted.md", mime="text/markdown"
)
