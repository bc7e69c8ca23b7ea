import sys
import json
from pathlib import Path

import streamlit as st
import yaml

# Make project root importable (so feedmark/ works)
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from feedmark.errors import MarkupError
from feedmark.formatters import supported_types
from feedmark.pipeline import render_feed
from feedmark.style import load_style


DEFAULT_FEED = "Obama visited Facebook headquarters: http://bit.ly/xyz @elversatile"
DEFAULT_SPANS = [
    {"start": 0, "end": 5, "type": "Entity"},
    {"start": 14, "end": 22, "type": "Entity"},
    {"start": 37, "end": 54, "type": "Link"},
    {"start": 55, "end": 67, "type": "Twitter username"},
]


st.set_page_config(
    page_title="Feedmark – Span Renderer",
    layout="wide",
)

st.title("Feedmark – Annotated Feed Renderer")
st.caption("Spans in, HTML out • No escaping • Overlapping spans unsupported")

# --------------------------------------------------------------------
# Sidebar configuration
# --------------------------------------------------------------------
st.sidebar.header("Settings")

style_path = st.sidebar.text_input(
    "Markup style file",
    value="configs/markup.yaml",
    help="YAML file with a `markup:` section. Leave empty for built-in defaults.",
)

style_ok = True
try:
    load_style(style_path or None)
except (OSError, yaml.YAMLError, MarkupError) as e:
    style_ok = False
    st.sidebar.error(f"Failed to load markup style: {e}")

type_choices = supported_types()
selected_types = st.sidebar.multiselect(
    "Annotation types to format",
    options=type_choices,
    default=type_choices,
    help="Spans of unchecked types are left as plain text.",
)

show_span_table = st.sidebar.checkbox("Show span table", value=True)

# --------------------------------------------------------------------
# Input
# --------------------------------------------------------------------
feed = st.text_area("Feed", value=DEFAULT_FEED, height=150)
spans_json = st.text_area(
    "Spans (JSON list of {start, end, type})",
    value=json.dumps(DEFAULT_SPANS, indent=2),
    height=250,
)

col_btn, _ = st.columns([1, 5])
with col_btn:
    run_btn = st.button("Render", type="primary", use_container_width=True)

if run_btn:
    try:
        raw_spans = json.loads(spans_json)
    except json.JSONDecodeError as e:
        st.error(f"Spans are not valid JSON: {e}")
        raw_spans = None

    if not style_ok:
        st.error("Cannot render because the markup style failed to load. Check sidebar.")
    elif raw_spans is not None:
        try:
            html, spans = render_feed(
                feed,
                raw_spans,
                style_path=style_path or None,
                allowed_types=selected_types,
            )
        except (KeyError, TypeError) as e:
            st.error(f"Malformed span entry: {e}")
        except MarkupError as e:
            st.error(f"{type(e).__name__}: {e}")
        else:
            st.success(f"Rendered {len(spans)} spans.")

            col_src, col_html = st.columns(2)
            with col_src:
                st.subheader("HTML source")
                st.code(html, language="html")
            with col_html:
                st.subheader("Preview")
                st.markdown(html, unsafe_allow_html=True)

            st.download_button(
                label="⬇️ Download HTML",
                data=html,
                file_name="feed.html",
                mime="text/html",
            )

            if show_span_table and spans:
                rows = [
                    {
                        "start": s.start,
                        "end": s.end,
                        "type": s.type,
                        "text": feed[s.start:s.end],
                    }
                    for s in sorted(spans, key=lambda s: s.start)
                ]
                st.markdown("### Spans")
                st.dataframe(rows, use_container_width=True)
