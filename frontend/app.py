import time
from datetime import datetime

import streamlit as st

from frontend.client import finish_submit, start_submit
from frontend.intake import (
    ALLOWED_EXTENSIONS,
    DEFAULT_LANGUAGE,
    LANGUAGE_CHOICES,
    load_upload,
)
from frontend.report import build_report, report_file_name
from frontend.state import (
    Cleared,
    CodeEdited,
    LanguageSelected,
    Panel,
    ReviewState,
    panel_for,
    reduce,
)

st.set_page_config(page_title="Code Review Assistant", layout="wide")

_DEFAULTS = {
    "review_state": ReviewState(),
    "code_input": "",
    "language_input": DEFAULT_LANGUAGE,
    "uploader_nonce": 0,
}
for _key, _value in _DEFAULTS.items():
    if _key not in st.session_state:
        st.session_state[_key] = _value


def _get_state() -> ReviewState:
    return st.session_state.review_state


def _set_state(state: ReviewState) -> None:
    st.session_state.review_state = state


def _dispatch(action) -> None:
    _set_state(reduce(_get_state(), action))


# --------- Callbacks ----------
def _on_upload(key: str) -> None:
    uploaded = st.session_state[key]
    if uploaded is None:
        return
    loaded = load_upload(uploaded.name, uploaded.getvalue())
    _dispatch(loaded)
    st.session_state.code_input = loaded.source_text
    st.session_state.language_input = loaded.language


def _on_code_edit() -> None:
    _dispatch(CodeEdited(source_text=st.session_state.code_input))


def _on_language_select() -> None:
    _dispatch(LanguageSelected(language=st.session_state.language_input))


def _on_analyze() -> None:
    start_submit(_get_state, _set_state)


def _on_clear() -> None:
    _dispatch(Cleared())
    st.session_state.code_input = ""
    # a fresh uploader key drops the previously selected file
    st.session_state.uploader_nonce += 1


# --------- Layout ----------
st.title("Code Review Assistant")
st.caption("AI-powered code analysis for better code quality")

left, right = st.columns(2)

with left:
    st.subheader("Upload Code")
    uploader_key = f"uploader_{st.session_state.uploader_nonce}"
    st.file_uploader(
        "Click to upload code file",
        type=ALLOWED_EXTENSIONS,
        key=uploader_key,
        on_change=_on_upload,
        args=(uploader_key,),
        help="Supports .js, .py, .java, .cpp, etc.",
    )
    if _get_state().file_name:
        st.success(_get_state().file_name)

    st.selectbox(
        "Language",
        options=list(LANGUAGE_CHOICES),
        format_func=LANGUAGE_CHOICES.get,
        key="language_input",
        on_change=_on_language_select,
    )
    st.text_area(
        "Or paste your code",
        key="code_input",
        height=260,
        placeholder="Paste your code here...",
        on_change=_on_code_edit,
    )

    analyze_col, clear_col = st.columns([3, 1])
    # start_submit runs before this pass, so a pending request draws it disabled
    analyze_col.button(
        "Analyze Code",
        key="analyze",
        type="primary",
        on_click=_on_analyze,
        disabled=_get_state().is_busy,
        width="stretch",
    )
    clear_col.button("Clear", key="clear", on_click=_on_clear, width="stretch")

with right:
    st.subheader("Review Report")

    if _get_state().is_busy:
        with st.spinner("Analyzing your code..."):
            finish_submit(_get_state, _set_state)

    state = _get_state()
    report = build_report(
        state.file_name, state.language, state.review, state.source_text, datetime.now()
    )
    if report is not None:
        st.download_button(
            "Download",
            data=report,
            file_name=report_file_name(time.time_ns() // 1_000_000),
            mime="text/plain",
        )

    panel = panel_for(state)
    if panel is Panel.ERROR:
        st.error(state.error)
    elif panel is Panel.LOADING:
        st.info("Analyzing your code...")
    elif panel is Panel.REVIEW:
        st.code(state.review, language=None)
    else:
        st.info("Upload code to see review report")

st.caption("Powered by Claude AI • Analyzes code quality, bugs, and best practices")
