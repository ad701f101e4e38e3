"""Star Map 3D: Streamlit app for exploring a star catalog in 3D."""

import html
import json
import os

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from starmap3d.catalog import (  # noqa: E402
    CatalogError,
    build_catalog,
    default_source,
    parse_records,
    run,
)
from starmap3d.i18n import t  # noqa: E402
from starmap3d.picker import format_star_info, selection_labels  # noqa: E402
from starmap3d.renderers.plotly_3d import render_plotly_chart  # noqa: E402

_lang: str = os.environ.get("STARMAP3D_LANG", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Dark fullscreen theme CSS ---
st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #000000 !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    [data-testid="stMainBlockContainer"] {
        padding-top: 0 !important;
    }
    /* Selected star info box, top right */
    .star-info {
        position: fixed;
        top: 20px;
        right: 20px;
        z-index: 50;
        padding: 10px;
        background-color: rgba(255, 255, 255, 0.8);
        border: 1px solid black;
        color: #000000;
    }
    .overlay-box {
        border: 1px solid #ff6b6b;
        color: #ff9999;
        padding: 1.2rem 1.6rem;
    }
    label, [data-testid="stWidgetLabel"] p {
        color: #aaaaaa !important;
        font-size: 0.85rem !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Session state initialization ---
if "catalog" not in st.session_state:
    st.session_state.catalog = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None
if "source" not in st.session_state:
    st.session_state.source = default_source()

# --- Input bar ---
col1, col2, col3 = st.columns([4, 3, 1])
with col1:
    source = st.text_input(t("label_catalog", _lang), value=st.session_state.source)
with col2:
    uploaded = st.file_uploader(t("label_upload", _lang), type=["json"])
with col3:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    submitted = st.button(t("btn_load", _lang), use_container_width=True)

# --- Form submission handler ---
if submitted or (st.session_state.catalog is None and st.session_state.error_msg is None):
    st.session_state.error_msg = None
    st.session_state.source = source
    with st.spinner(t("loading_catalog", _lang)):
        try:
            if uploaded is not None:
                try:
                    rows = json.loads(uploaded.getvalue())
                except ValueError as e:
                    raise CatalogError(f"Invalid JSON in {uploaded.name}: {e}") from e
                if not isinstance(rows, list):
                    raise CatalogError(f"{uploaded.name}: expected a JSON array")
                st.session_state.catalog = build_catalog(parse_records(rows), uploaded.name)
            else:
                st.session_state.catalog = run(source)
        except CatalogError as e:
            st.session_state.catalog = None
            st.session_state.error_msg = t("error_catalog", _lang).format(
                error=html.escape(str(e))
            )

# --- Error message ---
if st.session_state.error_msg:
    st.markdown(
        f"<div class='overlay-box'>{st.session_state.error_msg}</div>",
        unsafe_allow_html=True,
    )

# --- Chart area ---
catalog = st.session_state.catalog
if catalog is None:
    st.markdown(
        f"<div style='height:60vh; display:flex; align-items:center; justify-content:center;"
        f" color:#334466; font-size:1.2rem;'>{t('placeholder', _lang)}</div>",
        unsafe_allow_html=True,
    )
    st.stop()

fig = render_plotly_chart(catalog, lang=_lang)
st.plotly_chart(
    fig,
    use_container_width=True,
    config={"scrollZoom": True, "displayModeBar": False},
)

# --- Star selection ---
entities = catalog.entities
labels = selection_labels(entities)
selected = st.selectbox(
    t("label_select", _lang),
    options=range(len(entities)),
    format_func=lambda i: labels[i],
    index=None,
)
if selected is not None:
    entity = entities[selected]
    info = html.escape(format_star_info(entity, _lang)).replace("\n", "<br>")
    st.markdown(f"<div class='star-info'>{info}</div>", unsafe_allow_html=True)
